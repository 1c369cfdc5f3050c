"""Test module for the evaluation of all set differences."""
import unittest

from featureloc.isolation.difference import (
    SystemFeatureDifference,
    SystemsDifference,
)
from featureloc.isolation.exhaustive import (
    check_isolated_features,
    evaluate_difference,
    evaluate_intersections,
    evaluate_unions,
    generate_non_empty_differences,
)
from featureloc.space.feature_space import FeatureSpace
from featureloc.utils.exceptions import FeatureSpaceConsistencyError


class TestEvaluateDifference(unittest.TestCase):
    """Test evaluating single set differences on system features."""

    def setUp(self) -> None:
        self.space = FeatureSpace(2, 4)

    def test_intersections(self) -> None:
        difference = SystemsDifference(
            frozenset({"S2", "S4"}), frozenset({"S1", "S3"})
        )

        self.assertEqual(
            evaluate_intersections(self.space, difference),
            {"f1", "f1 + f2"}
        )

    def test_no_intersected_system(self) -> None:
        difference = SystemsDifference(
            frozenset(), frozenset({"S1", "S2", "S3", "S4"})
        )

        self.assertEqual(evaluate_intersections(self.space, difference), set())
        self.assertEqual(evaluate_difference(self.space, difference), set())

    def test_unions(self) -> None:
        difference = SystemsDifference(
            frozenset({"S4"}), frozenset({"S1", "S2"})
        )

        self.assertEqual(
            evaluate_unions(self.space, difference), {"f1", "f1 + f2"}
        )

    def test_difference(self) -> None:
        self.assertEqual(
            evaluate_difference(
                self.space,
                SystemsDifference(
                    frozenset({"S2", "S4"}), frozenset({"S1", "S3"})
                )
            ), {"f1"}
        )
        self.assertEqual(
            evaluate_difference(
                self.space,
                SystemsDifference(
                    frozenset({"S2", "S3"}), frozenset({"S1", "S4"})
                )
            ), set()
        )


class TestNonEmptyDifferences(unittest.TestCase):
    """Test the search over all set differences."""

    def test_single_feature(self) -> None:
        differences = generate_non_empty_differences(FeatureSpace(1, 1))

        self.assertEqual(
            differences, [
                SystemFeatureDifference(
                    2, "f1",
                    SystemsDifference(frozenset({"S2"}), frozenset({"S1"}))
                )
            ]
        )

    def test_two_features(self) -> None:
        differences = generate_non_empty_differences(FeatureSpace(2, 4))

        self.assertEqual([entry.difference_id for entry in differences],
                         [8, 10, 12, 14])
        self.assertEqual([entry.feature for entry in differences],
                         ["f1 * f2", "f1", "f2", "f1 + f2"])

    def test_every_model_is_consistent(self) -> None:
        """Every feature is isolated by exactly one set difference."""
        for num_features in (1, 2, 3):
            for model_id in range(1, 20):
                with self.subTest(num_features=num_features, model=model_id):
                    space = FeatureSpace(num_features, model_id)
                    differences = generate_non_empty_differences(space)

                    self.assertEqual(len(differences), space.total_features)
                    ids = [entry.difference_id for entry in differences]
                    self.assertEqual(ids, sorted(set(ids)))

    def test_missing_feature_is_detected(self) -> None:
        space = FeatureSpace(1, 1)

        with self.assertRaises(FeatureSpaceConsistencyError):
            check_isolated_features(space, [])

    def test_unknown_feature_is_detected(self) -> None:
        space = FeatureSpace(1, 1)
        differences = [
            SystemFeatureDifference(
                2, "f2",
                SystemsDifference(frozenset({"S2"}), frozenset({"S1"}))
            )
        ]

        with self.assertRaises(FeatureSpaceConsistencyError):
            check_isolated_features(space, differences)


class TwinFeatureSpace(FeatureSpace):
    """Feature space whose systems with ``f1`` also have a second feature
    that always occurs together with it."""

    def system_features(self, name):
        features = super().system_features(name)
        if "f1" in features:
            return features | {"f1 twin"}
        return features


class TestAmbiguousDifference(unittest.TestCase):
    """Test the detection of set differences with more than one feature."""

    def test_two_isolated_features_are_fatal(self) -> None:
        space = TwinFeatureSpace(2, 4)

        with self.assertLogs(
            "featureloc.isolation.exhaustive", level="ERROR"
        ) as logs:
            with self.assertRaises(FeatureSpaceConsistencyError) as context:
                generate_non_empty_differences(space)

        self.assertEqual(str(context.exception), "Set size = 2, must be 1!")
        self.assertEqual(len(logs.records), 1)
        self.assertIn("Set difference 10 isolates", logs.output[0])
        self.assertIn("'f1 twin'", logs.output[0])
