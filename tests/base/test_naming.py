"""Test module for feature and system names."""
import unittest

from featureloc.base.naming import (
    and_feature_name,
    and_not_feature_name,
    difference_name,
    independent_feature_name,
    not_feature_name,
    or_feature_name,
    or_not_feature_name,
    parse_system_name,
    system_name,
)
from featureloc.utils.exceptions import SystemNameFormatError


class TestFeatureNames(unittest.TestCase):
    """Test the canonical feature names."""

    def test_single_feature_names(self) -> None:
        self.assertEqual(independent_feature_name(3), "f3")
        self.assertEqual(not_feature_name(3), "!f3")

    def test_combination_names(self) -> None:
        self.assertEqual(or_feature_name([1, 2]), "f1 + f2")
        self.assertEqual(and_feature_name([1, 2, 4]), "f1 * f2 * f4")
        self.assertEqual(or_not_feature_name([1, 2]), "!f1 + !f2")
        self.assertEqual(and_not_feature_name([2, 3]), "!f2 * !f3")

    def test_names_are_canonical(self) -> None:
        self.assertEqual(or_feature_name((1, 3)), or_feature_name([1, 3]))


class TestSystemNames(unittest.TestCase):
    """Test names of systems and set differences."""

    def test_system_name(self) -> None:
        self.assertEqual(system_name(12), "S12")
        self.assertEqual(difference_name(42), "E42")

    def test_parse_system_name(self) -> None:
        self.assertEqual(parse_system_name("S1"), 1)
        self.assertEqual(parse_system_name(system_name(128)), 128)

    def test_parse_invalid_system_name(self) -> None:
        for name in ("", "S", "E1", "s1", "S1a", " S1"):
            with self.subTest(name=name):
                with self.assertRaises(SystemNameFormatError):
                    parse_system_name(name)
