"""Tests for guardian.findings.models: value types and the JSON wire shape."""

import json

import pytest
from pydantic import ValidationError

from guardian.findings.models import (
    SCHEMA_VERSION,
    AnalysisResult,
    FunctionDescriptor,
    FunctionRef,
    Location,
    Role,
    Violation,
)


def test_location_ordering_is_line_then_column():
    locations = [Location(line=3, column=0), Location(line=1, column=9), Location(line=1, column=2)]
    assert sorted(locations) == [
        Location(line=1, column=2),
        Location(line=1, column=9),
        Location(line=3, column=0),
    ]


def test_location_bounds():
    with pytest.raises(ValidationError):
        Location(line=0, column=0)
    with pytest.raises(ValidationError):
        Location(line=1, column=-1)


def test_location_is_immutable():
    loc = Location(line=1, column=0)
    with pytest.raises(ValidationError):
        loc.line = 2


def test_role_values():
    assert [r.value for r in Role] == ["component", "hook", "utility"]


def test_descriptor_wire_aliases():
    fn = FunctionDescriptor(
        name="useX",
        role=Role.HOOK,
        location=Location(line=1, column=6),
        jsx_returns=(Location(line=1, column=19),),
    )
    assert fn.model_dump(mode="json", by_alias=True) == {
        "name": "useX",
        "kind": "hook",
        "location": {"line": 1, "column": 6},
        "apiCalls": [],
        "jsxReturns": [{"line": 1, "column": 19}],
    }


def test_violation_wire_shape():
    violation = Violation(
        rule_id="no-markup-in-hook",
        message="Hooks must not return markup",
        severity="error",
        function=FunctionRef(name="useX", kind=Role.HOOK),
        location=Location(line=4, column=11),
    )
    assert violation.to_wire() == {
        "ruleId": "no-markup-in-hook",
        "message": "Hooks must not return markup",
        "severity": "error",
        "function": {"name": "useX", "kind": "hook"},
        "location": {"line": 4, "column": 11},
    }


def test_violation_rejects_unknown_severity():
    with pytest.raises(ValidationError):
        Violation(
            rule_id="x",
            message="m",
            severity="info",
            function=FunctionRef(name="F", kind=Role.COMPONENT),
            location=Location(line=1, column=0),
        )


def test_result_json_is_compact_and_keyed_by_wire_names():
    result = AnalysisResult(file_path="src/App.tsx")
    text = result.to_json()
    assert text == '{"schemaVersion":"1.0.0","filePath":"src/App.tsx","violations":[]}'
    assert json.loads(text)["schemaVersion"] == SCHEMA_VERSION
