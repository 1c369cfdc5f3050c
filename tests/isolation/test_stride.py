"""Test module for the difference expression generator."""
import unittest

from featureloc.isolation.stride import DifferenceExpressionGenerator
from featureloc.utils.exceptions import FeatureRangeError


class TestDifferenceExpressionGenerator(unittest.TestCase):
    """Test the periodic bit patterns of independent features."""

    def setUp(self) -> None:
        self.generator = DifferenceExpressionGenerator(3)

    def test_sizes(self) -> None:
        self.assertEqual(self.generator.num_features, 3)
        self.assertEqual(self.generator.num_systems, 8)

    def test_expressions(self) -> None:
        self.assertEqual(self.generator.expression(1).value, 0b10101010)
        self.assertEqual(self.generator.expression(2).value, 0b11001100)
        self.assertEqual(self.generator.expression(3).value, 0b11110000)
        self.assertEqual(self.generator.expression(3).width, 8)

    def test_is_intersected(self) -> None:
        self.assertFalse(self.generator.is_intersected(1, 1))
        self.assertTrue(self.generator.is_intersected(1, 2))
        self.assertFalse(self.generator.is_intersected(3, 4))
        self.assertTrue(self.generator.is_intersected(3, 5))
        self.assertTrue(self.generator.is_intersected(3, 8))

    def test_single_bits_match_expression(self) -> None:
        """Computing single bits yields the materialized bit vector."""
        generator = DifferenceExpressionGenerator(5)
        for feature_id in range(1, 6):
            expression = generator.expression(feature_id)
            for system_number in range(1, generator.num_systems + 1):
                with self.subTest(feature=feature_id, system=system_number):
                    self.assertEqual(
                        generator.is_intersected(feature_id, system_number),
                        expression.is_intersected(system_number)
                    )

    def test_bits_start_with_highest_system(self) -> None:
        self.assertEqual(
            "".join("1" if bit else "0" for bit in self.generator.bits(1)),
            self.generator.expression(1).to_bitstring()
        )

    def test_feature_out_of_range(self) -> None:
        for feature_id in (0, 4):
            with self.subTest(feature_id=feature_id):
                with self.assertRaises(FeatureRangeError):
                    self.generator.is_intersected(feature_id, 1)
                with self.assertRaises(FeatureRangeError):
                    self.generator.expression(feature_id)

    def test_system_out_of_range(self) -> None:
        for system_number in (0, 9):
            with self.subTest(system_number=system_number):
                with self.assertRaises(FeatureRangeError):
                    self.generator.is_intersected(1, system_number)
