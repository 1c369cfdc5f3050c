"""
Feature isolation by bit vector arithmetic.

Every feature is represented by a :class:`DifferenceExpression`, i.e., a bit
vector with one bit per system. The vectors of independent features follow a
periodic pattern, all dependent features are composed from them with bitwise
operations. Neither systems nor feature names have to be evaluated.
"""
import logging
import typing as tp
from functools import reduce

from featureloc.base.model_catalog import FeatureCategory
from featureloc.base.naming import (
    FEATURE_NOT,
    and_feature_name,
    and_not_feature_name,
    independent_feature_name,
    or_feature_name,
    or_not_feature_name,
)
from featureloc.isolation.difference import (
    DifferenceExpression,
    SystemFeatureDifference,
)
from featureloc.isolation.stride import DifferenceExpressionGenerator
from featureloc.space.feature_space import FeatureSpace

LOG = logging.getLogger(__name__)

FeatureExpressions = tp.List[tp.Tuple[str, DifferenceExpression]]


class FeatureCalculation:
    """Calculates the bit vectors of all features of a feature space."""

    def __init__(self, space: FeatureSpace) -> None:
        self.__space = space
        self.__generator = DifferenceExpressionGenerator(space.num_features)
        self.__expressions: tp.Dict[FeatureCategory, FeatureExpressions] = {}

        self.__expressions[FeatureCategory.INDEPENDENT
                          ] = self.calculate_independent_features()
        self.__expressions[FeatureCategory.NOT
                          ] = self.calculate_not_features()
        for category in (
            FeatureCategory.OR, FeatureCategory.AND, FeatureCategory.OR_NOT,
            FeatureCategory.AND_NOT
        ):
            self.__expressions[category] = self.calculate_combined_features(
                category
            )

    @property
    def num_systems(self) -> int:
        return self.__space.num_systems

    def expressions(self, category: FeatureCategory) -> FeatureExpressions:
        """Names and bit vectors of all features of a category that exist in
        the model."""
        if not self.__space.model.has_category(category):
            return []
        return self.__expressions[category]

    def all_expressions(self) -> FeatureExpressions:
        return [
            expression for category in FeatureCategory
            for expression in self.expressions(category)
        ]

    def calculate_independent_features(self) -> FeatureExpressions:
        return [(
            independent_feature_name(feature_id),
            self.__generator.expression(feature_id)
        ) for feature_id in self.__space.raw_independent_features]

    def calculate_not_features(self) -> FeatureExpressions:
        # NOTE: Names are not built with not_feature_name() but by prefixing
        # the name of the independent feature.
        return [(FEATURE_NOT + name, ~expression) for name, expression in
                self.__expressions[FeatureCategory.INDEPENDENT]]

    def calculate_combined_features(
        self, category: FeatureCategory
    ) -> FeatureExpressions:
        """
        Composes the bit vectors of or-, and-, or-not-, and and-not-features.

        Or-features unite the vectors of their independent features,
        and-features intersect them. The negated categories do the same with
        the vectors of the not-features.
        """
        base_category = FeatureCategory.NOT if category.is_negated \
            else FeatureCategory.INDEPENDENT
        base = [
            expression for _, expression in self.__expressions[base_category]
        ]

        namer, operator, initial = {
            FeatureCategory.OR: (
                or_feature_name, DifferenceExpression.__or__,
                DifferenceExpression.empty(self.num_systems)
            ),
            FeatureCategory.AND: (
                and_feature_name, DifferenceExpression.__and__,
                DifferenceExpression.full(self.num_systems)
            ),
            FeatureCategory.OR_NOT: (
                or_not_feature_name, DifferenceExpression.__or__,
                DifferenceExpression.empty(self.num_systems)
            ),
            FeatureCategory.AND_NOT: (
                and_not_feature_name, DifferenceExpression.__and__,
                DifferenceExpression.full(self.num_systems)
            ),
        }[category]

        return [(
            namer(group),
            reduce(operator, (base[i - 1] for i in group), initial)
        ) for group in self.__space.raw_dependent_features]


def calculate_differences(
    space: FeatureSpace
) -> tp.List[SystemFeatureDifference]:
    """
    Calculates the isolating set differences of all features of a feature
    space.

    Returns: one set difference per feature, ordered by difference id
    """
    calculation = FeatureCalculation(space)
    result = [
        SystemFeatureDifference(
            expression.value, name, expression.to_systems_difference()
        ) for name, expression in calculation.all_expressions()
    ]
    LOG.debug("Calculated %d set differences.", len(result))
    return sorted(result, key=lambda difference: difference.difference_id)
