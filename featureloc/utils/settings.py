"""
Settings module for the feature location tools.

All settings are stored in a benchbuild configuration tree. Each setting can be
modified via an environment variable, e.g., ``FEATURELOC_REPORT_SOLVER``, or
via a ``.featureloc.yaml`` config file.
"""
import os
import typing as tp
from os import makedirs, path
from pathlib import Path

import benchbuild.utils.settings as s
from plumbum import LocalPath

from featureloc.isolation.exhaustive import EXHAUSTIVE_FEATURE_LIMIT

SOLVERS = ["direct", "arithmetic", "exhaustive"]


def create_new_fl_config() -> s.Configuration:
    """
    Create a new default (uninitialized) feature location config.

    For internal use only! If you want to access the current config, use
    :func:`fl_cfg()` instead.

    Returns:
        a new default config object
    """
    cfg = s.Configuration(
        "featureloc",
        node={
            "config_file": {
                "desc":
                    "Config file path of featureloc. Not guaranteed to exist.",
                "default": None,
            },
            "result_dir": {
                "desc": "Result folder for feature location reports",
                "default": os.getcwd() + "/results",
            },
        }
    )

    cfg["report"] = {
        "prefix": {
            "desc": "File name prefix of feature location reports.",
            "default": "feature_differences_for_",
        },
        "bitstring_prefix": {
            "desc": "File name prefix of exported feature bit strings.",
            "default": "fl_",
        },
        "solver": {
            "desc":
                "Default way to isolate features, one of: " +
                ", ".join(SOLVERS),
            "default": "arithmetic",
        },
    }

    cfg["exhaustive"] = {
        "max_features": {
            "desc":
                "Largest number of independent features for which all set "
                "differences of systems are evaluated.",
            "default": EXHAUSTIVE_FEATURE_LIMIT,
        },
    }

    return cfg


_CFG: tp.Optional[s.Configuration] = None


def fl_cfg() -> s.Configuration:
    """Get the current feature location config."""
    global _CFG  # pylint: disable=global-statement
    if not _CFG:
        _CFG = create_new_fl_config()
        s.setup_config(
            _CFG, ['.featureloc.yaml', '.featureloc.yml'],
            "FEATURELOC_CONFIG_FILE"
        )
        s.update_env(_CFG)
    return _CFG


def create_missing_folders() -> None:
    """Create folders that do not exist but were set in the config."""
    config_node = fl_cfg()["result_dir"]
    if config_node.has_value() and\
            config_node.value is not None and\
            not path.isdir(config_node.value):
        makedirs(config_node.value)


def save_config() -> None:
    """Persist the config to a yaml file."""
    if fl_cfg()["config_file"].value is None:
        config_file = ".featureloc.yaml"
    else:
        config_file = str(fl_cfg()["config_file"])

    fl_cfg()["config_file"] = path.abspath(config_file)
    create_missing_folders()
    fl_cfg().store(LocalPath(config_file))


def get_result_dir() -> Path:
    """Folder for reports, created if it does not exist."""
    create_missing_folders()
    return Path(str(fl_cfg()["result_dir"]))
