"""Export of the bit vectors of all features, one file per feature
category."""
import logging
import typing as tp
from pathlib import Path

from featureloc.base.model_catalog import FeatureCategory
from featureloc.base.naming import SEPARATOR, independent_feature_name
from featureloc.isolation.arithmetic import FeatureCalculation
from featureloc.isolation.stride import DifferenceExpressionGenerator

LOG = logging.getLogger(__name__)


def bitstring_lines(calculation: FeatureCalculation,
                    category: FeatureCategory) -> tp.List[str]:
    """Lines ``<feature>\\t<bits>`` with the bit of the highest system
    first."""
    return [
        name + SEPARATOR + expression.to_bitstring()
        for name, expression in calculation.expressions(category)
    ]


def low_memory_bitstring_lines(
    generator: DifferenceExpressionGenerator
) -> tp.Iterator[str]:
    """
    Same lines as :func:`bitstring_lines` for independent features, but every
    bit is computed on its own and no bit vector is created.
    """
    for feature_id in range(1, generator.num_features + 1):
        bits = "".join(
            "1" if bit else "0" for bit in generator.bits(feature_id)
        )
        yield independent_feature_name(feature_id) + SEPARATOR + bits


def bitstring_file_name(
    prefix: str, num_features: int, category: FeatureCategory
) -> str:
    return f"{prefix}{num_features}_{category.short_name}.csv"


def write_bitstrings(
    output_dir: Path,
    prefix: str,
    calculation: FeatureCalculation,
    num_features: int,
    low_memory: bool = False
) -> tp.List[Path]:
    """
    Writes one file per feature category of the model.

    Args:
        output_dir: directory for the files
        prefix: prefix of all file names
        calculation: bit vectors of the analyzed feature space
        num_features: number of independent features
        low_memory: compute the bits of independent features one at a time

    Returns: paths of the written files
    """
    written_files = []
    for category in FeatureCategory:
        lines: tp.Iterable[str]
        if low_memory and category is FeatureCategory.INDEPENDENT:
            lines = low_memory_bitstring_lines(
                DifferenceExpressionGenerator(num_features)
            )
        else:
            if not calculation.expressions(category):
                continue
            lines = bitstring_lines(calculation, category)

        file_path = output_dir / bitstring_file_name(
            prefix, num_features, category
        )
        with open(file_path, "w") as output_file:
            output_file.writelines(line + "\n" for line in lines)
        LOG.info("Wrote %s", file_path)
        written_files.append(file_path)

    return written_files
