"""
Feature space of a software product line.

The feature space is derived from the number of independent features and a
model of the catalog. It contains the sizes of all feature categories, the
canonical names of all features and the list of all systems, each described by
the sorted names of the features it has.
"""
import logging
import typing as tp

from featureloc.base.combination import all_combinations
from featureloc.base.combinatorics import negate, power2, unsigned_to_ids
from featureloc.base.model_catalog import (
    FeatureCategory,
    FeatureModel,
    get_model,
)
from featureloc.base.naming import (
    and_feature_name,
    and_not_feature_name,
    independent_feature_name,
    not_feature_name,
    or_feature_name,
    or_not_feature_name,
    parse_system_name,
    system_name,
)
from featureloc.utils.exceptions import SystemLookupError

LOG = logging.getLogger(__name__)

SystemTy = tp.Tuple[str, ...]

COMBINATION_NAMERS: tp.Dict[FeatureCategory, tp.Callable[[tp.Sequence[int]],
                                                         str]] = {
    FeatureCategory.OR: or_feature_name,
    FeatureCategory.AND: and_feature_name,
    FeatureCategory.OR_NOT: or_not_feature_name,
    FeatureCategory.AND_NOT: and_not_feature_name,
}


class SummaryEntry(tp.NamedTuple):
    """One line of the summary of a feature space."""

    value: str
    short_name: str
    description: str


class FeatureSpace:
    """
    All features and systems of a product line with ``num_features``
    independent features under the model ``model_id``.

    The feature space is computed once on construction and is read-only
    afterwards.
    """

    def __init__(self, num_features: int, model_id: int) -> None:
        self.__model = get_model(model_id)
        self.__num_features = num_features

        self.__category_sizes = {
            category: self.__model.category_size(category, num_features)
            for category in FeatureCategory
        }
        self.__num_systems = power2(num_features)

        self.__raw_independent_features = tuple(range(1, num_features + 1))
        self.__raw_dependent_features = tuple(
            tuple(combination)
            for combination in all_combinations(self.__raw_independent_features)
        )

        self.__all_systems = tuple(
            self.generate_system(unsigned_to_ids(index))
            for index in range(self.__num_systems)
        )
        self.__system_feature_sets = tuple(
            frozenset(system) for system in self.__all_systems
        )
        LOG.debug(
            "Created feature space for F=%d, M=%d with T=%d features and "
            "S=%d systems.", num_features, model_id, self.total_features,
            self.__num_systems
        )

    @property
    def model(self) -> FeatureModel:
        return self.__model

    @property
    def model_id(self) -> int:
        """Id of the selected model."""
        return self.__model.model_id

    @property
    def num_features(self) -> int:
        """Number of independent features (F)."""
        return self.__num_features

    @property
    def num_systems(self) -> int:
        """Number of systems of the product line (S)."""
        return self.__num_systems

    @property
    def num_differences(self) -> int:
        """Number of all set differences of systems (D)."""
        return power2(self.__num_systems)

    def category_size(self, category: FeatureCategory) -> int:
        """Actual number of features of the given category."""
        return self.__category_sizes[category]

    @property
    def dependent_features(self) -> int:
        """Number of inherently dependent features (DF)."""
        return sum(
            size for category, size in self.__category_sizes.items()
            if category is not FeatureCategory.INDEPENDENT
        )

    @property
    def total_features(self) -> int:
        """Total number of features (T)."""
        return self.__num_features + self.dependent_features

    @property
    def raw_independent_features(self) -> tp.Tuple[int, ...]:
        return self.__raw_independent_features

    @property
    def raw_dependent_features(self) -> tp.Tuple[tp.Tuple[int, ...], ...]:
        """Id groups of all dependent features, i.e., all combinations of at
        least two independent feature ids."""
        return self.__raw_dependent_features

    @property
    def all_systems(self) -> tp.Tuple[SystemTy, ...]:
        """All systems, the system with index i has the name ``S<i+1>``."""
        return self.__all_systems

    def system_names(self) -> tp.List[str]:
        return [system_name(number) for number in self.system_numbers()]

    def system_numbers(self) -> tp.Iterable[int]:
        return range(1, self.__num_systems + 1)

    def summary(self) -> tp.List[SummaryEntry]:
        """Key figures of the feature space in the order they are
        reported."""
        return [
            SummaryEntry(str(self.model_id), "M", "selected model"),
            SummaryEntry(
                str(self.total_features), "T",
                "actual total number of features"
            ),
            SummaryEntry(
                str(self.num_features), "F", "number of independent features"
            ),
            SummaryEntry(
                str(self.dependent_features), "DF",
                "actual total number of inherently dependent features"
            ),
            SummaryEntry(
                str(self.category_size(FeatureCategory.OR)), "O",
                "actual number of or-features"
            ),
            SummaryEntry(
                str(self.category_size(FeatureCategory.AND)), "A",
                "actual number of and-features"
            ),
            SummaryEntry(
                str(self.category_size(FeatureCategory.NOT)), "N",
                "actual number of not-features"
            ),
            SummaryEntry(
                str(self.category_size(FeatureCategory.OR_NOT)), "ON",
                "actual number of or-not-features"
            ),
            SummaryEntry(
                str(self.category_size(FeatureCategory.AND_NOT)), "AN",
                "actual number of and-not-features"
            ),
            SummaryEntry(
                str(self.num_systems), "S", "number of systems of SPL"
            ),
            SummaryEntry(
                str(self.num_differences), "D",
                "number of all set differences of SPL systems"
            ),
        ]

    def generate_system(self, ids: tp.Sequence[int]) -> SystemTy:
        """
        Creates the sorted names of all features that define a system.

        Args:
            ids: ids of the independent features the system has

        Returns: feature names of the system
        """
        absent = negate(ids, self.__num_features)
        result = [independent_feature_name(i) for i in ids]

        if self.__model.has_or:
            result.extend(
                self.__combination_names(FeatureCategory.OR, any, ids)
            )
        if self.__model.has_and:
            result.extend(
                self.__combination_names(FeatureCategory.AND, all, ids)
            )
        if self.__model.has_not:
            result.extend(not_feature_name(i) for i in absent)
        if self.__model.has_or_not:
            result.extend(
                self.__combination_names(FeatureCategory.OR_NOT, any, absent)
            )
        if self.__model.has_and_not:
            result.extend(
                self.__combination_names(FeatureCategory.AND_NOT, all, absent)
            )

        return tuple(sorted(result))

    def __combination_names(
        self, category: FeatureCategory,
        quantifier: tp.Callable[[tp.Iterable[bool]], bool],
        ids: tp.Collection[int]
    ) -> tp.List[str]:
        namer = COMBINATION_NAMERS[category]
        return [
            namer(group)
            for group in self.__raw_dependent_features
            if quantifier(i in ids for i in group)
        ]

    def features_of(self, category: FeatureCategory) -> tp.List[str]:
        """
        Names of all features of a category of the whole product line.

        Combination features are ordered by group size first and
        lexicographically by their ids second.
        """
        if not self.__model.has_category(category):
            return []
        if category is FeatureCategory.INDEPENDENT:
            return [
                independent_feature_name(i)
                for i in self.__raw_independent_features
            ]
        if category is FeatureCategory.NOT:
            return [
                not_feature_name(i) for i in self.__raw_independent_features
            ]
        namer = COMBINATION_NAMERS[category]
        return [namer(group) for group in self.__raw_dependent_features]

    def all_features(self) -> tp.List[str]:
        """Sorted names of all features of the product line."""
        return sorted(
            name for category in FeatureCategory
            for name in self.features_of(category)
        )

    def system_features(self, name: str) -> tp.FrozenSet[str]:
        """
        Look up the features that define a system.

        Args:
            name: system name, e.g., ``S3``

        Returns: set of the feature names of the system

        Raises:
            SystemNameFormatError: if name is no system identifier
            SystemLookupError: if the product line has no such system
        """
        number = parse_system_name(name)
        if not 1 <= number <= self.__num_systems:
            raise SystemLookupError(
                f"{name} is not a system of a product line with "
                f"{self.__num_systems} systems."
            )
        return self.__system_feature_sets[number - 1]

    def system_has_feature(self, number: int, feature: str) -> bool:
        """Whether the system with the 1-based number has the feature."""
        return feature in self.__system_feature_sets[number - 1]
