"""
Feature isolation by evaluating every possible set difference of systems.

There are ``D = 2^S`` set differences of ``S`` systems, so this is only
feasible for very small product lines. The evaluation serves as an oracle for
the other ways of isolating features.
"""
import logging
import typing as tp

from featureloc.isolation.difference import (
    SystemFeatureDifference,
    SystemsDifference,
    to_systems_difference,
)
from featureloc.space.feature_space import FeatureSpace
from featureloc.utils.exceptions import FeatureSpaceConsistencyError

LOG = logging.getLogger(__name__)

EXHAUSTIVE_FEATURE_LIMIT = 4


def evaluate_intersections(space: FeatureSpace,
                           difference: SystemsDifference) -> tp.Set[str]:
    """Intersection of the features of all intersected systems, empty if no
    system is intersected."""
    result: tp.Set[str] = set()
    systems = sorted(difference.intersections)
    if systems:
        result = set(space.system_features(systems[0]))
        for name in systems[1:]:
            result &= space.system_features(name)
            if not result:
                break
    return result


def evaluate_unions(space: FeatureSpace,
                    difference: SystemsDifference) -> tp.Set[str]:
    """Union of the features of all united systems."""
    result: tp.Set[str] = set()
    for name in difference.unions:
        result |= space.system_features(name)
    return result


def evaluate_difference(space: FeatureSpace,
                        difference: SystemsDifference) -> tp.Set[str]:
    """
    Evaluates a set difference on the features of the systems.

    Returns: the features of all intersected systems that no united system
             has
    """
    return evaluate_intersections(space, difference) - evaluate_unions(
        space, difference
    )


def generate_non_empty_differences(
    space: FeatureSpace
) -> tp.List[SystemFeatureDifference]:
    """
    Evaluates all set differences of the systems of a feature space and keeps
    those that isolate a feature.

    Args:
        space: the feature space to analyze

    Returns: all set differences with a non-empty result, ordered by their id

    Raises:
        FeatureSpaceConsistencyError: if a set difference isolates more than
            one feature or the isolated features do not match the features of
            the feature space
    """
    if space.num_features > EXHAUSTIVE_FEATURE_LIMIT:
        LOG.warning(
            "Evaluating all %d set differences of %d systems, this will "
            "take very long.", space.num_differences, space.num_systems
        )

    result = []
    for difference_id in range(1, space.num_differences):
        difference = to_systems_difference(difference_id, space.num_systems)
        isolated = evaluate_difference(space, difference)
        if not isolated:
            continue
        if len(isolated) != 1:
            LOG.error(
                "Set difference %d isolates %s.", difference_id,
                sorted(isolated)
            )
            raise FeatureSpaceConsistencyError(
                f"Set size = {len(isolated)}, must be 1!"
            )
        result.append(
            SystemFeatureDifference(
                difference_id, next(iter(isolated)), difference
            )
        )

    check_isolated_features(space, result)
    return result


def check_isolated_features(
    space: FeatureSpace, differences: tp.Sequence[SystemFeatureDifference]
) -> None:
    """
    Checks that every feature of the feature space is isolated by exactly one
    set difference.

    Raises:
        FeatureSpaceConsistencyError: if the check fails
    """
    isolated = sorted(difference.feature for difference in differences)
    expected = space.all_features()
    if isolated != expected:
        LOG.error(
            "Expected %d isolated features, found %d: %s", len(expected),
            len(isolated), isolated
        )
        raise FeatureSpaceConsistencyError(
            f"Found {len(isolated)} isolating set differences, expected "
            f"{space.total_features}!"
        )
