from __future__ import annotations

"""
Typer CLI entry point and orchestration of the analysis pipeline.

Commands:
- analyze FILE: analyze one file; JSON result on stdout (or a rich table)
- functions FILE: dump the extracted function descriptors as JSON
- scan DIR: analyze every JS/TS file under a directory, one file at a time

Failures to read or parse a file are written to stderr and exit with code 1.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import List

import typer
from pydantic import TypeAdapter

from guardian.engine import analyze_file
from guardian.errors import AnalysisError
from guardian.extractor import parse_file
from guardian.findings.models import AnalysisResult, FunctionDescriptor
from guardian.reporting.console import print_result, print_results
from guardian.traversal import find_source_files

logger = logging.getLogger(__name__)

app = typer.Typer(help="Architecture Guardian - flags React components that call APIs and hooks that return JSX.")

_DESCRIPTORS = TypeAdapter(List[FunctionDescriptor])


class OutputFormat(str, Enum):
    JSON = "json"
    PRETTY = "pretty"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def _fail(exc: AnalysisError) -> None:
    typer.echo(f"failed to analyze file: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command()
def analyze(
    target: Path = typer.Argument(..., help="JavaScript/TypeScript file to analyze."),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JSON, "--format", "-f", help="json (machine-readable) or pretty."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and fix hints."),
) -> None:
    """
    Analyze a single file.

    The dialect (JavaScript, TypeScript, TSX) is inferred from the extension.
    """
    _configure_logging(verbose)
    try:
        result = analyze_file(target)
    except AnalysisError as exc:
        _fail(exc)
        return

    if output_format is OutputFormat.JSON:
        typer.echo(result.to_json())
    else:
        print_result(result, verbose=verbose)


@app.command()
def functions(
    target: Path = typer.Argument(..., help="JavaScript/TypeScript file to inspect."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Print the function descriptors extracted from a file as a JSON array."""
    _configure_logging(verbose)
    try:
        descriptors = parse_file(target)
    except AnalysisError as exc:
        _fail(exc)
        return
    typer.echo(_DESCRIPTORS.dump_json(descriptors, by_alias=True).decode("utf-8"))


@app.command()
def scan(
    root: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        resolve_path=True,
        help="Directory to scan.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and fix hints."),
) -> None:
    """
    Analyze every JavaScript/TypeScript file under a directory.

    Each file is analyzed on its own. Files that cannot be read or parsed are
    listed as failed and make the exit code 1.
    """
    _configure_logging(verbose)
    files = find_source_files(root)
    if not files:
        logger.warning("No JavaScript/TypeScript files found under %s", root)

    results: List[AnalysisResult] = []
    failures: List[tuple[str, str]] = []
    for path in files:
        try:
            results.append(analyze_file(path))
        except AnalysisError as exc:
            failures.append((str(path), str(exc)))

    print_results(results, failures=failures, verbose=verbose)
    if failures:
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for the `guardian` script and `python -m guardian.main`."""
    app()


if __name__ == "__main__":
    main()
