"""
Driver module for `fl-config`.

Shows and changes the settings of the feature location tools, e.g.,
``fl-config set report/solver=direct``.
"""
import copy
import textwrap
import typing as tp

import click
import yaml
from benchbuild.utils.settings import ConfigDumper, Configuration

from featureloc.utils.settings import fl_cfg, save_config


@click.group("fl-config")
def main() -> None:
    """
    Manage the feature location config.

    `fl-config`
    """


def __option_path(option: str) -> tp.List[str]:
    return [key.replace('-', '_') for key in option.split("/") if key]


def __lookup(option_path: tp.List[str]) -> Configuration:
    config = fl_cfg()
    for depth, key in enumerate(option_path):
        if key not in config.node:
            raise click.UsageError(
                f"Unknown config option '{'/'.join(option_path[:depth + 1])}'."
            )
        config = config[key]
    return config


def __to_yaml(config: Configuration) -> str:
    """Yaml dump of a (sub-)config as it would be stored."""
    exported = copy.deepcopy(config)
    exported.filter_exports()
    return str(
        yaml.dump(
            exported.node,
            width=80,
            indent=4,
            default_flow_style=False,
            Dumper=ConfigDumper
        )
    )


@main.command("set")
@click.argument("config_values", nargs=-1, metavar="KEY=VALUE")
def __config_set(config_values: tp.List[str]) -> None:
    """
    Set config options, e.g., report/solver=direct.

    Values are parsed as yaml, so exhaustive/max_features=3 stores a number.
    """
    for config_value in config_values:
        option, separator, value = config_value.partition("=")
        option_path = __option_path(option)
        if not separator or not option_path:
            raise click.UsageError(
                f"Expected KEY=VALUE, got '{config_value}'."
            )
        parent = __lookup(option_path[:-1])
        __lookup(option_path)
        parent[option_path[-1]] = yaml.safe_load(value)

    save_config()


@main.command("show")
@click.argument("config_options", nargs=-1)
def __config_show(config_options: tp.Tuple[str, ...]) -> None:
    """
    Show config options or whole sub-configs, e.g., report.

    Shows the complete config if no option is given.
    """
    for option in config_options or ("",):
        dump = __to_yaml(__lookup(__option_path(option)))
        if option:
            click.echo(f"{option}:\n{textwrap.indent(dump, '    ')}")
        else:
            click.echo(dump)


if __name__ == '__main__':
    main()
