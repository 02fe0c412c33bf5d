"""Tests for the rich console reporter."""

import io

from rich.console import Console

from guardian.findings.models import AnalysisResult, FunctionRef, Location, Role, Violation
from guardian.reporting.console import RULE_REMEDIATIONS, print_result, print_results


def _console():
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def _result(path, *rule_ids):
    violations = [
        Violation(
            rule_id=rule_id,
            message=f"message for {rule_id}",
            function=FunctionRef(name="Widget", kind=Role.COMPONENT),
            location=Location(line=i + 1, column=2),
        )
        for i, rule_id in enumerate(rule_ids)
    ]
    return AnalysisResult(file_path=path, violations=violations)


def test_clean_file_panel():
    console, buffer = _console()
    print_result(AnalysisResult(file_path="src/App.tsx"), console=console)
    assert "No issues found" in buffer.getvalue()


def test_violation_rows():
    console, buffer = _console()
    print_result(_result("src/Widget.tsx", "no-direct-api-in-component"), console=console)
    out = buffer.getvalue()
    assert "src/Widget.tsx" in out
    assert "no-direct-api-in-component" in out
    assert "Widget (component)" in out
    assert "ERROR" in out


def test_verbose_shows_remediation_once_per_rule():
    console, buffer = _console()
    result = _result("a.tsx", "no-direct-api-in-component", "no-direct-api-in-component")
    print_result(result, verbose=True, console=console)
    out = buffer.getvalue()
    assert out.count("[Fix]") == 1
    assert RULE_REMEDIATIONS["no-direct-api-in-component"].split()[0] in out


def test_multi_file_summary():
    console, buffer = _console()
    print_results(
        [_result("a.tsx", "no-markup-in-hook"), _result("b.tsx")],
        failures=[("c.tsx", "syntax error at c.tsx:1:0: unexpected '['")],
        console=console,
    )
    out = buffer.getvalue()
    assert "Files Summary" in out
    assert "SMELLY" in out
    assert "OK" in out
    assert "FAILED" in out
    assert "1 violation" in out
    assert "1 failed" in out
