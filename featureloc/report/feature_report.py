"""
Printable artifacts of a feature location analysis: the summary header, the
list of systems, and the table of isolating set differences.
"""
import typing as tp

from tabulate import tabulate

from featureloc.base.naming import (
    CLOSING_PARENTHESIS,
    OPENING_PARENTHESIS,
    SEPARATOR,
    SET_DIFFERENCE,
    SET_INTERSECTION,
    SET_SEPARATOR,
    SET_UNION,
    difference_name,
    system_name,
)
from featureloc.isolation.difference import (
    SystemFeatureDifference,
    SystemsDifference,
)
from featureloc.space.feature_space import FeatureSpace


def header_lines(space: FeatureSpace) -> tp.List[str]:
    """Summary lines ``<value>\\t<short name>\\t<description>``."""
    return [SEPARATOR.join(entry) for entry in space.summary()]


def header_table(space: FeatureSpace, table_format: str = "simple") -> str:
    """Summary of a feature space rendered as table."""
    return tabulate(
        space.summary(),
        headers=["value", "name", "description"],
        tablefmt=table_format,
        disable_numparse=True
    )


def system_lines(space: FeatureSpace) -> tp.List[str]:
    """One line per system, every feature name is followed by a
    separator."""
    return [
        system_name(number) + SEPARATOR +
        "".join(feature + SEPARATOR for feature in system)
        for number, system in enumerate(space.all_systems, start=1)
    ]


def __operand(systems: tp.AbstractSet[str], operator: str) -> str:
    joined = f"{SET_SEPARATOR}{operator}{SET_SEPARATOR}".join(sorted(systems))
    return (
        f"{OPENING_PARENTHESIS}{SET_SEPARATOR}{joined}"
        f"{SET_SEPARATOR}{CLOSING_PARENTHESIS}"
    )


def format_difference(difference: SystemsDifference) -> str:
    """
    Renders a set difference, e.g., ``( S2 & S4 ) \\ ( S1 | S3 )``.

    The systems of each operand are in sorted order of their names.
    """
    return (
        __operand(difference.intersections, SET_INTERSECTION) +
        f"{SET_SEPARATOR}{SET_DIFFERENCE}{SET_SEPARATOR}" +
        __operand(difference.unions, SET_UNION)
    )


def isolation_lines(
    isolations: tp.Mapping[str, SystemsDifference]
) -> tp.List[str]:
    """Lines ``<feature>\\t<set difference>`` ordered by feature name."""
    return [
        feature + SEPARATOR + format_difference(isolations[feature])
        for feature in sorted(isolations)
    ]


def difference_lines(
    differences: tp.Iterable[SystemFeatureDifference]
) -> tp.List[str]:
    """Lines ``E<id>\\t<feature>\\t<set difference>`` in the given order."""
    return [
        difference_name(entry.difference_id) + SEPARATOR + entry.feature +
        SEPARATOR + format_difference(entry.difference)
        for entry in differences
    ]


def write_report(
    stream: tp.TextIO, space: FeatureSpace, result_lines: tp.Iterable[str]
) -> None:
    """
    Writes the header, the systems and the results of an analysis, separated
    by empty lines.

    Args:
        stream: text stream to write to
        space: the analyzed feature space
        result_lines: formatted results, see :func:`isolation_lines` and
                      :func:`difference_lines`
    """
    stream.writelines(line + "\n" for line in header_lines(space))
    stream.write("\n")
    stream.writelines(line + "\n" for line in system_lines(space))
    stream.write("\n")
    stream.writelines(line + "\n" for line in result_lines)
