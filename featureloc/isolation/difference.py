"""
Set differences of systems and their bit vector representation.

A set difference ``( S1 & S2 ) \\ ( S3 | S4 )`` splits all systems into two
groups: the systems whose features are intersected and the systems whose
features are united and subtracted afterwards. The same split can be encoded
as a bit vector with one bit per system, bit ``s`` is set iff system ``s + 1``
belongs to the intersections. Read as an integer, this bit vector is the id
of the set difference.
"""
import typing as tp

from featureloc.base.naming import parse_system_name, system_name


class SystemsDifference(tp.NamedTuple):
    """
    Set difference expression of systems.

    ``intersections`` are the names of the systems whose features are
    intersected, that is, the left operand of the difference. ``unions`` are
    the names of the systems whose features are united, that is, the right
    operand.
    """

    intersections: tp.FrozenSet[str]
    unions: tp.FrozenSet[str]


class SystemFeatureDifference(tp.NamedTuple):
    """A set difference together with its id and the feature it isolates."""

    difference_id: int
    feature: str
    difference: SystemsDifference


class DifferenceExpression:
    """
    Fixed width bit vector over the systems of a product line.

    The width is the number of systems S. Bits above the width are never set,
    negation is restricted to the valid system range.
    """

    def __init__(self, value: int, width: int) -> None:
        if value < 0 or value >> width:
            raise ValueError(
                f"Value {value} does not fit into {width} system bits."
            )
        self.__value = value
        self.__width = width

    @staticmethod
    def full(width: int) -> 'DifferenceExpression':
        """Bit vector with all systems set."""
        return DifferenceExpression(system_mask(width), width)

    @staticmethod
    def empty(width: int) -> 'DifferenceExpression':
        return DifferenceExpression(0, width)

    @staticmethod
    def from_systems_difference(
        difference: SystemsDifference, width: int
    ) -> 'DifferenceExpression':
        """
        Converts the set representation of a difference to a bit vector.

        Args:
            difference: the set difference to convert
            width: number of systems of the product line
        """
        value = 0
        for name in difference.intersections:
            value |= 1 << (parse_system_name(name) - 1)
        return DifferenceExpression(value, width)

    @property
    def value(self) -> int:
        """The bit vector read as integer, i.e., the difference id."""
        return self.__value

    @property
    def width(self) -> int:
        return self.__width

    def is_intersected(self, system_number: int) -> bool:
        """Whether the system with the 1-based number is part of the
        intersections."""
        return bool(self.__value & (1 << (system_number - 1)))

    def to_systems_difference(self) -> SystemsDifference:
        """Converts the bit vector to the set representation of the
        difference."""
        return to_systems_difference(self.__value, self.__width)

    def to_bitstring(self) -> str:
        """Bits of all systems, starting with the highest system."""
        if self.__width == 0:
            return ""
        return format(self.__value, f"0{self.__width}b")

    def __check_width(self, other: 'DifferenceExpression') -> None:
        if self.__width != other.width:
            raise ValueError(
                f"Width mismatch of difference expressions: {self.__width} "
                f"!= {other.width}"
            )

    def __and__(self, other: 'DifferenceExpression') -> 'DifferenceExpression':
        self.__check_width(other)
        return DifferenceExpression(self.__value & other.value, self.__width)

    def __or__(self, other: 'DifferenceExpression') -> 'DifferenceExpression':
        self.__check_width(other)
        return DifferenceExpression(self.__value | other.value, self.__width)

    def __invert__(self) -> 'DifferenceExpression':
        return DifferenceExpression(
            ~self.__value & system_mask(self.__width), self.__width
        )

    def __eq__(self, other: tp.Any) -> bool:
        if isinstance(other, DifferenceExpression):
            return (self.value == other.value) and (self.width == other.width)
        return False

    def __ne__(self, other: tp.Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self.__value, self.__width))

    def __int__(self) -> int:
        return self.__value

    def __str__(self) -> str:
        return self.to_bitstring()

    def __repr__(self) -> str:
        return f"DifferenceExpression({self.to_bitstring()!r})"


def system_mask(num_systems: int) -> int:
    """Bit mask with one set bit for every existing system."""
    return (1 << num_systems) - 1


def to_systems_difference(
    difference_id: int, num_systems: int
) -> SystemsDifference:
    """
    Builds the set difference with the given id.

    Args:
        difference_id: bit s set means system ``s + 1`` is intersected,
                       otherwise, it is united
        num_systems: number of systems of the product line
    """
    intersections = []
    unions = []
    for position in range(num_systems):
        if difference_id & (1 << position):
            intersections.append(system_name(position + 1))
        else:
            unions.append(system_name(position + 1))
    return SystemsDifference(frozenset(intersections), frozenset(unions))
