"""
The catalog of feature models.

A model selects which categories of inherently dependent features exist in a
product line in addition to its independent features.
"""
import typing as tp
from enum import Enum

from featureloc.base.combinatorics import sum_of_combinations
from featureloc.utils.exceptions import InvalidModelError


class FeatureCategory(Enum):
    """Categories of features, in the order their names are generated."""
    INDEPENDENT = "F"
    OR = "O"
    AND = "A"
    NOT = "N"
    OR_NOT = "ON"
    AND_NOT = "AN"

    @property
    def short_name(self) -> str:
        return self.value

    @property
    def is_negated(self) -> bool:
        return self in (
            FeatureCategory.NOT, FeatureCategory.OR_NOT,
            FeatureCategory.AND_NOT
        )

    @property
    def is_combination(self) -> bool:
        """Whether the features of the category combine two or more
        independent features."""
        return self in (
            FeatureCategory.OR, FeatureCategory.AND, FeatureCategory.OR_NOT,
            FeatureCategory.AND_NOT
        )


class FeatureModel(tp.NamedTuple):
    """Enabled dependent feature categories of a model."""

    model_id: int
    has_or: bool
    has_and: bool
    has_not: bool
    has_or_not: bool
    has_and_not: bool

    def has_category(self, category: FeatureCategory) -> bool:
        """Whether features of the given category exist in the model."""
        return {
            FeatureCategory.INDEPENDENT: True,
            FeatureCategory.OR: self.has_or,
            FeatureCategory.AND: self.has_and,
            FeatureCategory.NOT: self.has_not,
            FeatureCategory.OR_NOT: self.has_or_not,
            FeatureCategory.AND_NOT: self.has_and_not,
        }[category]

    def categories(self) -> tp.List[FeatureCategory]:
        """All categories of the model, independent features included."""
        return [
            category for category in FeatureCategory
            if self.has_category(category)
        ]

    def category_size(
        self, category: FeatureCategory, num_features: int
    ) -> int:
        """Number of features of a category for a product line with
        num_features independent features."""
        if not self.has_category(category):
            return 0
        if category.is_combination:
            return sum_of_combinations(num_features, 2)
        return num_features


# The table is hand-made and not every combination of the five flags is part
# of it. Or-not and and-not features only occur together with not-features.
#                    id  OR     AND    NOT    OR-NOT AND-NOT
MODEL_CATALOG: tp.Dict[int, FeatureModel] = {
    model.model_id: model for model in [
        FeatureModel(1, False, False, False, False, False),
        FeatureModel(2, True, False, False, False, False),
        FeatureModel(3, False, True, False, False, False),
        FeatureModel(4, True, True, False, False, False),
        FeatureModel(5, False, False, True, False, False),
        FeatureModel(6, True, False, True, False, False),
        FeatureModel(7, False, True, True, False, False),
        FeatureModel(8, True, True, True, False, False),
        FeatureModel(9, False, False, True, True, False),
        FeatureModel(10, False, False, True, False, True),
        FeatureModel(11, True, False, True, True, False),
        FeatureModel(12, False, True, True, True, False),
        FeatureModel(13, True, True, True, True, False),
        FeatureModel(14, True, False, True, False, True),
        FeatureModel(15, False, True, True, False, True),
        FeatureModel(16, True, True, True, False, True),
        FeatureModel(17, True, False, True, True, True),
        FeatureModel(18, False, True, True, True, True),
        FeatureModel(19, True, True, True, True, True),
    ]
}

MIN_MODEL_ID = min(MODEL_CATALOG)
MAX_MODEL_ID = max(MODEL_CATALOG)


def get_model(model_id: int) -> FeatureModel:
    """
    Look up a model in the catalog.

    Args:
        model_id: id of the model in [1, 19]

    Returns: the model with the given id

    Raises:
        InvalidModelError: if there is no such model
    """
    try:
        return MODEL_CATALOG[model_id]
    except KeyError as err:
        raise InvalidModelError(
            f"Unknown model id {model_id}, valid ids are "
            f"{MIN_MODEL_ID}..{MAX_MODEL_ID}."
        ) from err


def has_or(model_id: int) -> bool:
    return get_model(model_id).has_or


def has_and(model_id: int) -> bool:
    return get_model(model_id).has_and


def has_not(model_id: int) -> bool:
    return get_model(model_id).has_not


def has_or_not(model_id: int) -> bool:
    return get_model(model_id).has_or_not


def has_and_not(model_id: int) -> bool:
    return get_model(model_id).has_and_not
