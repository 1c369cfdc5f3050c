"""Test module for the export of feature bit strings."""
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from featureloc.base.model_catalog import FeatureCategory
from featureloc.isolation.arithmetic import FeatureCalculation
from featureloc.isolation.stride import DifferenceExpressionGenerator
from featureloc.report.bitstring_report import (
    bitstring_file_name,
    bitstring_lines,
    low_memory_bitstring_lines,
    write_bitstrings,
)
from featureloc.space.feature_space import FeatureSpace


class TestBitstringLines(unittest.TestCase):
    """Test the lines of the exported files."""

    def test_independent(self) -> None:
        calculation = FeatureCalculation(FeatureSpace(2, 19))

        self.assertEqual(
            bitstring_lines(calculation, FeatureCategory.INDEPENDENT),
            ["f1\t1010", "f2\t1100"]
        )

    def test_and_not(self) -> None:
        calculation = FeatureCalculation(FeatureSpace(2, 19))

        self.assertEqual(
            bitstring_lines(calculation, FeatureCategory.AND_NOT),
            ["!f1 * !f2\t0001"]
        )

    def test_low_memory_lines_match(self) -> None:
        calculation = FeatureCalculation(FeatureSpace(4, 1))

        self.assertEqual(
            list(low_memory_bitstring_lines(DifferenceExpressionGenerator(4))),
            bitstring_lines(calculation, FeatureCategory.INDEPENDENT)
        )

    def test_file_name(self) -> None:
        self.assertEqual(
            bitstring_file_name("fl_", 3, FeatureCategory.OR_NOT),
            "fl_3_ON.csv"
        )


class TestWriteBitstrings(unittest.TestCase):
    """Test writing one file per feature category."""

    def test_all_categories(self) -> None:
        with TemporaryDirectory() as tmp_dir:
            output_dir = Path(tmp_dir)
            written = write_bitstrings(
                output_dir, "fl_", FeatureCalculation(FeatureSpace(2, 19)), 2
            )

            self.assertEqual([path.name for path in written], [
                "fl_2_F.csv", "fl_2_O.csv", "fl_2_A.csv", "fl_2_N.csv",
                "fl_2_ON.csv", "fl_2_AN.csv"
            ])
            self.assertEqual((output_dir / "fl_2_F.csv").read_text(),
                             "f1\t1010\nf2\t1100\n")
            self.assertEqual((output_dir / "fl_2_N.csv").read_text(),
                             "!f1\t0101\n!f2\t0011\n")

    def test_only_model_categories(self) -> None:
        with TemporaryDirectory() as tmp_dir:
            written = write_bitstrings(
                Path(tmp_dir), "fl_", FeatureCalculation(FeatureSpace(2, 4)),
                2
            )

            self.assertEqual([path.name for path in written],
                             ["fl_2_F.csv", "fl_2_O.csv", "fl_2_A.csv"])

    def test_low_memory(self) -> None:
        with TemporaryDirectory() as tmp_dir:
            output_dir = Path(tmp_dir)
            write_bitstrings(
                output_dir,
                "fl_",
                FeatureCalculation(FeatureSpace(3, 1)),
                3,
                low_memory=True
            )

            self.assertEqual((output_dir / "fl_3_F.csv").read_text(),
                             "f1\t10101010\nf2\t11001100\nf3\t11110000\n")
