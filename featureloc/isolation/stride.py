"""
Set differences of independent features computed from the feature and system
ids alone.

For independent feature ``f`` the systems alternate in runs of ``2^(f-1)``
between "united" and "intersected", starting with a run of united systems.
"""
import typing as tp

from featureloc.base.combinatorics import ceil_div, power2
from featureloc.isolation.difference import DifferenceExpression
from featureloc.utils.exceptions import FeatureRangeError


class DifferenceExpressionGenerator:
    """
    Generates the set differences that isolate the independent features of a
    product line with ``num_features`` independent features.

    :meth:`expression` materializes the complete bit vector of a feature,
    :meth:`is_intersected` computes a single bit arithmetically and, hence,
    needs no memory that grows with the number of systems.
    """

    def __init__(self, num_features: int) -> None:
        self.__num_features = num_features
        self.__num_systems = power2(num_features)

    @property
    def num_features(self) -> int:
        return self.__num_features

    @property
    def num_systems(self) -> int:
        return self.__num_systems

    def __check_feature(self, feature_id: int) -> None:
        if not 1 <= feature_id <= self.__num_features:
            raise FeatureRangeError(
                f"Feature id {feature_id} is not in [1, {self.__num_features}]"
            )

    def expression(self, feature_id: int) -> DifferenceExpression:
        """
        Bit vector of an independent feature, built from its periodic bit
        pattern.

        Args:
            feature_id: feature id in [1, F]
        """
        self.__check_feature(feature_id)
        stride = power2(feature_id - 1)
        value = 0
        bit = False
        counter = 0
        for system in range(self.__num_systems):
            if bit:
                value |= 1 << system
            counter += 1
            if counter == stride:
                bit = not bit
                counter = 0
        return DifferenceExpression(value, self.__num_systems)

    def is_intersected(self, feature_id: int, system_number: int) -> bool:
        """
        Whether a system is intersected in the set difference of an
        independent feature.

        Args:
            feature_id: feature id in [1, F]
            system_number: system number in [1, S]

        Returns: True, if the system is part of the intersections and False,
                 if it is part of the unions
        """
        self.__check_feature(feature_id)
        if not 1 <= system_number <= self.__num_systems:
            raise FeatureRangeError(
                f"System number {system_number} is not in "
                f"[1, {self.__num_systems}]"
            )
        stride = power2(feature_id - 1)
        return not ceil_div(system_number, stride) % 2

    def bits(self, feature_id: int) -> tp.Iterator[bool]:
        """Yields the bits of a feature one at a time, starting with the
        highest system."""
        for system_number in range(self.__num_systems, 0, -1):
            yield self.is_intersected(feature_id, system_number)
