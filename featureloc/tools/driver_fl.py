"""
Driver module for `fl`.

This module handles command-line parsing and maps the commands to the feature
location functionality.
"""
import logging
import typing as tp
from pathlib import Path

import click

from featureloc.base.model_catalog import MAX_MODEL_ID
from featureloc.isolation.arithmetic import (
    FeatureCalculation,
    calculate_differences,
)
from featureloc.isolation.direct import (
    generate_feature_isolations,
    isolate_feature,
)
from featureloc.isolation.exhaustive import generate_non_empty_differences
from featureloc.report.bitstring_report import write_bitstrings
from featureloc.report.feature_report import (
    difference_lines,
    format_difference,
    header_table,
    isolation_lines,
    write_report,
)
from featureloc.space.feature_space import FeatureSpace
from featureloc.tools.tool_util import input_error_handler
from featureloc.utils.cli_util import (
    initialize_cli_tool,
    model_id_argument,
    num_features_argument,
)
from featureloc.utils.settings import SOLVERS, fl_cfg, get_result_dir

LOG = logging.getLogger(__name__)


@click.group("fl")
def main() -> None:
    """
    Feature location for software product lines.

    `fl`
    """
    initialize_cli_tool()


def __selected_solver(solver: tp.Optional[str]) -> str:
    if solver is None:
        solver = str(fl_cfg()["report"]["solver"])
    if solver not in SOLVERS:
        raise click.UsageError(
            f"Unknown solver '{solver}', choose one of: {', '.join(SOLVERS)}"
        )
    return solver


def __check_exhaustive_limit(num_features: int) -> None:
    max_features = int(fl_cfg()["exhaustive"]["max_features"].value)
    if num_features > max_features:
        raise click.UsageError(
            f"The exhaustive solver is limited to {max_features} independent "
            f"features (exhaustive/max_features)."
        )


def result_lines(space: FeatureSpace, solver: str) -> tp.List[str]:
    """
    Isolates all features of the feature space with the selected solver.

    Returns: the formatted results
    """
    LOG.info("Isolating features with the %s solver.", solver)
    if solver == "direct":
        return isolation_lines(generate_feature_isolations(space))
    if solver == "exhaustive":
        return difference_lines(generate_non_empty_differences(space))
    return difference_lines(calculate_differences(space))


def report_file_name(num_features: int, model_id: int) -> str:
    prefix = str(fl_cfg()["report"]["prefix"])
    return f"{prefix}{num_features}_model_{model_id}.csv"


@main.command("run")
@num_features_argument()
@model_id_argument()
@click.option(
    "--solver",
    type=click.Choice(SOLVERS),
    default=None,
    help="How features are isolated, defaults to report/solver."
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Report file, defaults to a file in the result dir."
)
@input_error_handler
def __run(
    num_features: int, model_id: int, solver: tp.Optional[str],
    output: tp.Optional[Path]
) -> None:
    """
    Analyze a product line and write the report.

    FEATURES is the number of independent features, MODEL the id of the model.
    """
    selected_solver = __selected_solver(solver)
    if selected_solver == "exhaustive":
        __check_exhaustive_limit(num_features)

    space = FeatureSpace(num_features, model_id)
    lines = result_lines(space, selected_solver)

    if output is None:
        output = get_result_dir() / report_file_name(num_features, model_id)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w") as report_file:
        write_report(report_file, space, lines)

    click.echo(f"Results written to {output} ... Finished!")


@main.command("show")
@num_features_argument()
@model_id_argument()
@click.option(
    "--table-format",
    default="simple",
    help="Table format, see the formats supported by tabulate."
)
@input_error_handler
def __show(num_features: int, model_id: int, table_format: str) -> None:
    """Show the key figures of a product line."""
    click.echo(header_table(FeatureSpace(num_features, model_id), table_format))


@main.command("isolate")
@num_features_argument()
@model_id_argument()
@click.argument("feature")
@input_error_handler
def __isolate(num_features: int, model_id: int, feature: str) -> None:
    """
    Show the set difference that isolates FEATURE.

    Feature names must be quoted if they contain spaces, e.g., "f1 + f2".
    """
    space = FeatureSpace(num_features, model_id)
    if feature not in space.all_features():
        raise click.UsageError(
            f"The product line has no feature '{feature}'."
        )
    click.echo(
        f"{feature}\t{format_difference(isolate_feature(space, feature))}"
    )


@main.command("bitstrings")
@num_features_argument()
@click.option(
    "--model",
    "model_id",
    type=click.IntRange(min=1, max=MAX_MODEL_ID),
    default=MAX_MODEL_ID,
    show_default=True,
    help="Model that selects the exported feature categories."
)
@click.option(
    "--low-memory",
    is_flag=True,
    help="Compute the bits of independent features one at a time."
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the files, defaults to the result dir."
)
@input_error_handler
def __bitstrings(
    num_features: int, model_id: int, low_memory: bool,
    output_dir: tp.Optional[Path]
) -> None:
    """Export the bit vectors of all features, one file per category."""
    if output_dir is None:
        output_dir = get_result_dir()
    output_dir.mkdir(parents=True, exist_ok=True)

    calculation = FeatureCalculation(FeatureSpace(num_features, model_id))
    written_files = write_bitstrings(
        output_dir,
        str(fl_cfg()["report"]["bitstring_prefix"]), calculation,
        num_features, low_memory
    )
    for file_path in written_files:
        click.echo(f"Written {file_path}")


if __name__ == '__main__':
    main()
