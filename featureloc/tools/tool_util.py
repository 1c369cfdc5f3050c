"""Utilities for tool handling."""

import typing as tp
from functools import wraps

import click

from featureloc.utils.exceptions import (
    CombinationDomainError,
    FeatureRangeError,
    InvalidModelError,
    SystemLookupError,
    SystemNameFormatError,
)

INPUT_ERRORS = (
    CombinationDomainError, FeatureRangeError, InvalidModelError,
    SystemLookupError, SystemNameFormatError
)


def input_error_handler(
    func: tp.Callable[..., None]
) -> tp.Callable[..., None]:
    """Wrapper for drivers to turn invalid user input into a usage error with
    a helpful message."""

    @wraps(func)
    def wrapper_input_error_handler(*args: tp.Any, **kwargs: tp.Any) -> None:
        try:
            func(*args, **kwargs)
        except INPUT_ERRORS as err:
            raise click.UsageError(str(err)) from err

    return wrapper_input_error_handler
