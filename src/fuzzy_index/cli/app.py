"""Main CLI application for fuzzy-index."""

from pathlib import Path
from typing import Any, NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console

from fuzzy_index import __version__
from fuzzy_index.cli.data import load_objects, parse_field_spec
from fuzzy_index.cli.options import (
    ExactFieldOption,
    FieldOption,
    FormatChoice,
    FormatOption,
    OptionalFieldOption,
    VerboseOption,
    get_output_format,
)
from fuzzy_index.config import get_config, reload_config
from fuzzy_index.config.defaults import get_config_path
from fuzzy_index.config.schema import OutputFormat
from fuzzy_index.exceptions import FuzzyIndexError, InvalidFieldError
from fuzzy_index.output import JSONLinesFormatter, OutputFormatter, build_rows, get_formatter
from fuzzy_index.search import FieldDefinition, SearchIndex, SearchOptions, SearchResult
from fuzzy_index.utils.logging import setup_logging

# Create Typer app
app = typer.Typer(
    name="fuzzy-index",
    help="Fuzzy search over JSON records",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for output
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"fuzzy-index version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file to use instead of the default.",
    ),
) -> None:
    """Fuzzy search over JSON records."""
    try:
        config = reload_config(config_path) if config_path else get_config()
    except FuzzyIndexError as e:
        _fail(e)
    setup_logging(
        level=config.logging.level,
        log_file=config.logging.file,
        json_format=config.logging.json_format,
    )


def _fail(error: FuzzyIndexError, formatter: OutputFormatter | None = None) -> NoReturn:
    message = f"{error.user_message}: {error}"
    if formatter is None:
        err_console.print(f"[red]Error:[/red] {message}")
    else:
        formatter.print_error(message)
    raise typer.Exit(error.exit_code)


def compare_by_score(a: SearchResult[Any], b: SearchResult[Any]) -> float:
    """Order by score, then by position in the data file."""
    if a.score == b.score:
        return a.index - b.index
    return a.score - b.score


def _build_fields(
    fields: list[str],
    exact_fields: list[str],
    optional_fields: list[str],
) -> list[FieldDefinition[Any]]:
    definitions = [parse_field_spec(spec) for spec in fields]
    definitions += [parse_field_spec(spec, use_exact_search=True) for spec in exact_fields]
    definitions += [
        parse_field_spec(spec, only_count_weight_if_matched=True) for spec in optional_fields
    ]
    if not definitions:
        raise InvalidFieldError("At least one --field, --exact-field or --optional-field is required")
    return definitions


@app.command()
def search(
    data_file: Path = typer.Argument(..., help="JSON array or JSON Lines file of objects."),
    patterns: list[str] = typer.Argument(..., help="Search terms; every term must match."),
    fields: FieldOption = None,
    exact_fields: ExactFieldOption = None,
    optional_fields: OptionalFieldOption = None,
    threshold: float | None = typer.Option(
        None, "--threshold", "-t", help="Highest error ratio counted as a match."
    ),
    return_excluded: bool = typer.Option(
        False, "--return-excluded", "-x", help="Also list objects that did not match."
    ),
    close_to_start: float | None = typer.Option(
        None, "--close-to-start", help="Score multiplier for matches in the first 3 characters."
    ),
    after_space: float | None = typer.Option(
        None, "--after-space", help="Score multiplier for matches right after a space."
    ),
    in_order: float | None = typer.Option(
        None, "--in-order", help="Score multiplier for terms found in query order."
    ),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Maximum results shown."),
    format: FormatOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Search the objects in DATA_FILE.

    Fields are indexed in option-kind order: every --field first, then
    every --exact-field, then every --optional-field, each group in the
    order given. Positions in a result's matches follow that order.
    """
    config = get_config()
    if verbose:
        setup_logging(
            level="DEBUG",
            log_file=config.logging.file,
            json_format=config.logging.json_format,
        )

    formatter: OutputFormatter
    if format == FormatChoice.JSONL:
        formatter = JSONLinesFormatter(verbose=verbose)
    else:
        output_format = get_output_format(format, config.output.default_format.value)
        extra: dict[str, Any] = {"color": config.output.color} if output_format == OutputFormat.RICH else {}
        formatter = get_formatter(output_format, verbose=verbose, **extra)

    try:
        objects = load_objects(data_file)
        definitions = _build_fields(fields or [], exact_fields or [], optional_fields or [])

        overrides: dict[str, Any] = {}
        if threshold is not None:
            overrides["threshold"] = threshold
        if return_excluded:
            overrides["return_excluded"] = True
        if close_to_start is not None:
            overrides["multiplier_for_match_close_to_start"] = close_to_start
        if after_space is not None:
            overrides["multiplier_for_match_after_space"] = after_space
        if in_order is not None:
            overrides["multiplier_for_matches_in_order"] = in_order
        options = SearchOptions.model_validate({**config.search.model_dump(), **overrides})

        index = SearchIndex(objects, definitions, sort_compare=compare_by_score)
        results = index.search(patterns, options)
    except FuzzyIndexError as e:
        _fail(e, formatter)
    except ValidationError as e:
        formatter.print_error(f"Invalid search options: {e}")
        raise typer.Exit(2) from None

    shown = results[: limit or config.output.limit]
    formatter.print_results(build_rows(shown, index), title=" ".join(patterns))


@app.command("config")
def config_cmd(
    show_path: bool = typer.Option(
        False,
        "--path",
        "-p",
        help="Show config file path.",
    ),
) -> None:
    """Show current configuration."""
    if show_path:
        console.print(str(get_config_path()))
        return

    config = get_config()
    console.print("[bold]fuzzy-index configuration[/bold]\n")
    console.print(f"Config file: {get_config_path()}")
    console.print(f"Output format: {config.output.default_format.value}")
    console.print(f"Log level: {config.logging.level}")

    console.print("\n[bold]Search defaults:[/bold]")
    for key, value in config.search.model_dump().items():
        console.print(f"  {key}: {value}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
