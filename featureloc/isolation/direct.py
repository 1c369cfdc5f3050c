"""Feature isolation read directly from the systems of a feature space."""
import logging
import typing as tp

from featureloc.base.naming import system_name
from featureloc.isolation.difference import SystemsDifference
from featureloc.space.feature_space import FeatureSpace

LOG = logging.getLogger(__name__)

FeatureIsolations = tp.Dict[str, SystemsDifference]


def isolate_feature(space: FeatureSpace, feature: str) -> SystemsDifference:
    """
    Computes the set difference that isolates a feature by checking for every
    system whether it has the feature.

    Args:
        space: the feature space to analyze
        feature: name of the feature to isolate

    Returns: systems with the feature as intersections, all other systems as
             unions
    """
    intersections = []
    unions = []
    for number in space.system_numbers():
        if space.system_has_feature(number, feature):
            intersections.append(system_name(number))
        else:
            unions.append(system_name(number))
    return SystemsDifference(frozenset(intersections), frozenset(unions))


def generate_feature_isolations(space: FeatureSpace) -> FeatureIsolations:
    """
    Computes the isolating set differences of all features of a feature space.

    Returns: mapping from feature name to set difference, ordered by feature
             name
    """
    LOG.debug(
        "Isolating %d features over %d systems.", space.total_features,
        space.num_systems
    )
    return {
        feature: isolate_feature(space, feature)
        for feature in space.all_features()
    }
