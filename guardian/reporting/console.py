# Rich console output: format violations for terminal display.

from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.markup import escape
from rich.text import Text

from guardian.findings.models import AnalysisResult, Violation


# Remediation hints per rule (shown with --verbose)
RULE_REMEDIATIONS: dict[str, str] = {
    "no-direct-api-in-component": (
        "Move the request into a custom hook (e.g. useUser) or a data layer, "
        "and let the component only render what it receives."
    ),
    "no-markup-in-hook": (
        "Return data and callbacks from the hook; render the markup in a "
        "component that calls the hook."
    ),
}

# Severity → Rich style
SEVERITY_STYLE = {
    "error": "bold red",
    "warning": "bold yellow",
}

DEFAULT_SEVERITY_STYLE = "bold white"


def _severity_style(severity: str) -> str:
    return SEVERITY_STYLE.get(severity.lower(), DEFAULT_SEVERITY_STYLE)


def _get_remediation(violation: Violation) -> str | None:
    return RULE_REMEDIATIONS.get(violation.rule_id)


def _violations_table(violations: Sequence[Violation]) -> Table:
    table = Table(
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE,
        padding=(0, 1),
        expand=False,
    )
    table.add_column("Line", justify="right", style="dim", width=5)
    table.add_column("Col", justify="right", style="dim", width=4)
    table.add_column("Severity", width=8)
    table.add_column("Rule", width=28)
    table.add_column("Function")
    table.add_column("Message", style="white")

    for v in violations:
        table.add_row(
            str(v.location.line),
            str(v.location.column),
            Text(v.severity.upper(), style=_severity_style(v.severity)),
            Text(f"[{v.rule_id}]", style="dim"),
            f"{v.function.name} ({v.function.kind.value})",
            v.message,
        )
    return table


def print_result(
    result: AnalysisResult,
    verbose: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print one file's violations; a clean file gets a green panel."""
    console = console or Console()

    if not result.violations:
        console.print(
            Panel(
                f"[green]No issues found in {escape(result.file_path)}.[/green]",
                title="Architecture Guardian",
                border_style="green",
                box=box.ROUNDED,
            )
        )
        return

    console.print()
    console.print(Panel(
        f"[bold cyan]{escape(result.file_path)}[/bold cyan]",
        box=box.SIMPLE_HEAD,
        border_style="blue",
        padding=(0, 1),
    ))
    console.print(_violations_table(result.violations))

    # Verbose: show remediation hints per unique rule in this file
    if verbose:
        seen_rules: set[str] = set()
        for v in result.violations:
            if v.rule_id in seen_rules:
                continue
            seen_rules.add(v.rule_id)
            hint = _get_remediation(v)
            if hint:
                console.print(f"  [dim][Fix][/dim] [{v.rule_id}] {hint}")
        if seen_rules:
            console.print()


def print_results(
    results: Sequence[AnalysisResult],
    failures: Sequence[tuple[str, str]] = (),
    verbose: bool = False,
    console: Optional[Console] = None,
) -> None:
    """
    Print a multi-file report: violations per file, then a file summary table
    and a totals footer. failures holds (path, message) for files that could
    not be analyzed.
    """
    console = console or Console()

    for result in results:
        if result.violations:
            print_result(result, verbose=verbose, console=console)

    _print_file_summary_table(results, failures, console)
    _print_summary(results, failures, console)


def _print_file_summary_table(
    results: Sequence[AnalysisResult],
    failures: Sequence[tuple[str, str]],
    console: Console,
) -> None:
    table = Table(
        title="Files Summary",
        show_header=True,
        header_style="bold cyan",
        box=box.ROUNDED,
        padding=(0, 1),
    )
    table.add_column("File", style="white")
    table.add_column("Status", width=8)
    table.add_column("Violations", justify="right", width=10)

    for result in sorted(results, key=lambda r: (not r.violations, r.file_path)):
        if result.violations:
            status = Text("SMELLY", style="bold red")
        else:
            status = Text("OK", style="bold green")
        table.add_row(Text(result.file_path), status, str(len(result.violations)))
    for path, message in sorted(failures):
        table.add_row(f"{escape(path)}\n[dim]{escape(message)}[/dim]", Text("FAILED", style="bold yellow"), "-")

    console.print()
    console.print(Panel(table, border_style="cyan", box=box.ROUNDED))


def _print_summary(
    results: Sequence[AnalysisResult],
    failures: Sequence[tuple[str, str]],
    console: Console,
) -> None:
    by_severity: dict[str, int] = {}
    total = 0
    for result in results:
        for v in result.violations:
            by_severity[v.severity] = by_severity.get(v.severity, 0) + 1
            total += 1

    summary_parts = [f"[bold]{total} violation{'s' if total != 1 else ''}[/bold]"]
    for sev in ("error", "warning"):
        if sev in by_severity:
            summary_parts.append(f"[{_severity_style(sev)}]{by_severity[sev]} {sev}[/]")
    summary_parts.append(f"{len(results)} file(s) analyzed")
    if failures:
        summary_parts.append(f"[bold yellow]{len(failures)} failed[/]")

    console.print()
    console.print(
        Panel(
            " | ".join(summary_parts),
            title="Summary",
            border_style="yellow" if total or failures else "green",
            box=box.ROUNDED,
        )
    )
