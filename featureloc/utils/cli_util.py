"""Command line utilities."""

import logging
import os
import typing as tp

import click
from rich.traceback import install

from featureloc.base.model_catalog import MAX_MODEL_ID, MIN_MODEL_ID


def initialize_cli_tool() -> None:
    """Initializes all relevant context and tools for the cli tools."""
    install(width=120)
    initialize_logger_config()


def initialize_logger_config() -> None:
    """Initializes the logging framework with a basic config, allowing the user
    to pass the warning level via an environment variable ``LOG_LEVEL``."""
    log_level = os.environ.get('LOG_LEVEL', "WARNING").upper()
    logging.basicConfig(level=log_level)


def num_features_argument() -> tp.Callable[..., tp.Any]:
    """Click argument for the number of independent features."""
    return click.argument(
        "num_features", type=click.IntRange(min=1), metavar="FEATURES"
    )


def model_id_argument() -> tp.Callable[..., tp.Any]:
    """Click argument for a model id of the catalog."""
    return click.argument(
        "model_id",
        type=click.IntRange(min=MIN_MODEL_ID, max=MAX_MODEL_ID),
        metavar="MODEL"
    )
