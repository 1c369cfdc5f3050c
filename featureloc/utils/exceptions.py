"""This module contains custom exceptions."""


class CombinationDomainError(ValueError):
    """Raised if a combination generator is created for an invalid universe or
    sample size, i.e., ``k > n`` or ``n == 0``."""


class InvalidModelError(ValueError):
    """Raised if a model id is not part of the model catalog."""


class SystemNameFormatError(ValueError):
    """Raised if a string does not match the format of a system name."""


class SystemLookupError(LookupError):
    """Raised if a well formed system name refers to a system that does not
    exist in the product line."""


class FeatureRangeError(ValueError):
    """Raised if a feature or system id is outside of the configured
    bounds."""


class FeatureSpaceConsistencyError(Exception):
    """
    Raised if the evaluation of set differences contradicts the structure of
    the feature space, e.g., a set difference isolates more than one feature.

    This is not an input error, it indicates an ill-formed feature space and
    must abort the current run.
    """
