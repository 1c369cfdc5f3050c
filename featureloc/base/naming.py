"""
Canonical names for features, systems and set differences, together with the
glyphs used to render set difference expressions.

All combination names list their feature ids in the given order, callers pass
ids in ascending order so that equal id sets yield identical names.
"""
import re
import typing as tp

from featureloc.utils.exceptions import SystemNameFormatError

SET_INTERSECTION = "&"
SET_DIFFERENCE = "\\"
SET_UNION = "|"
SET_SEPARATOR = " "
OPENING_PARENTHESIS = "("
CLOSING_PARENTHESIS = ")"

FEATURE = "f"
FEATURE_AND = "*"
FEATURE_OR = "+"
FEATURE_NOT = "!"
FEATURE_SEPARATOR = " "

SYSTEM = "S"
DIFFERENCE_EXPRESSION = "E"
SEPARATOR = "\t"

SYSTEM_NAME_PATTERN = re.compile(rf"^{SYSTEM}(?P<number>\d+)$")


def independent_feature_name(feature_id: int) -> str:
    return f"{FEATURE}{feature_id}"


def not_feature_name(feature_id: int) -> str:
    return f"{FEATURE_NOT}{FEATURE}{feature_id}"


def __join(names: tp.Iterable[str], operator: str) -> str:
    return f"{FEATURE_SEPARATOR}{operator}{FEATURE_SEPARATOR}".join(names)


def or_feature_name(ids: tp.Sequence[int]) -> str:
    """Name of the or-feature of ids, e.g., ``f1 + f2``."""
    return __join(map(independent_feature_name, ids), FEATURE_OR)


def and_feature_name(ids: tp.Sequence[int]) -> str:
    """Name of the and-feature of ids, e.g., ``f1 * f2``."""
    return __join(map(independent_feature_name, ids), FEATURE_AND)


def or_not_feature_name(ids: tp.Sequence[int]) -> str:
    """Name of the or-not-feature of ids, e.g., ``!f1 + !f2``."""
    return __join(map(not_feature_name, ids), FEATURE_OR)


def and_not_feature_name(ids: tp.Sequence[int]) -> str:
    """Name of the and-not-feature of ids, e.g., ``!f1 * !f2``."""
    return __join(map(not_feature_name, ids), FEATURE_AND)


def system_name(number: int) -> str:
    """Name of the system with the 1-based number."""
    return f"{SYSTEM}{number}"


def difference_name(difference_id: int) -> str:
    return f"{DIFFERENCE_EXPRESSION}{difference_id}"


def parse_system_name(name: str) -> int:
    """
    Parse a system name back to its 1-based system number.

    Raises:
        SystemNameFormatError: if name is not a system identifier
    """
    match = SYSTEM_NAME_PATTERN.match(name)
    if match is None:
        raise SystemNameFormatError(f"{name} is not a system identifier.")
    return int(match.group("number"))
