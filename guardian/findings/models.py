# Pydantic data models for analysis results: Location, Role, FunctionDescriptor, Violation.
# Field names are snake_case in Python; aliases give the camelCase JSON wire shape.

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

# Bump whenever the wire shape or the violation ordering changes.
SCHEMA_VERSION = "1.0.0"

Severity = Literal["error", "warning"]


class Role(str, Enum):
    """What a function is for, judged from its name alone."""

    COMPONENT = "component"
    HOOK = "hook"
    UTILITY = "utility"


class Location(BaseModel):
    """A position in the analyzed file (1-based line, 0-based column)."""

    line: int = Field(..., ge=1, description="1-based line number")
    column: int = Field(..., ge=0, description="0-based column offset")

    model_config = {"frozen": True}

    def sort_key(self) -> tuple[int, int]:
        return (self.line, self.column)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self.sort_key() < other.sort_key()


class FunctionDescriptor(BaseModel):
    """
    One function-like declaration found in a file.

    api_calls and jsx_returns are listed in the order the body walk met them.
    """

    name: str
    role: Role = Field(..., alias="kind")
    location: Location
    api_calls: tuple[Location, ...] = Field(default=(), alias="apiCalls")
    jsx_returns: tuple[Location, ...] = Field(default=(), alias="jsxReturns")

    model_config = {"frozen": True, "populate_by_name": True}


class FunctionRef(BaseModel):
    """Name and role of the function a violation points at."""

    name: str
    kind: Role

    model_config = {"frozen": True}


class Violation(BaseModel):
    """A single rule firing against one function."""

    rule_id: str = Field(..., alias="ruleId")
    message: str
    severity: Severity = "error"
    function: FunctionRef
    location: Location

    model_config = {"frozen": True, "populate_by_name": True}

    def sort_key(self) -> tuple[int, int, str]:
        return (self.location.line, self.location.column, self.rule_id)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class AnalysisResult(BaseModel):
    """Everything reported for one file: schema version, path, sorted violations."""

    schema_version: str = Field(default=SCHEMA_VERSION, alias="schemaVersion")
    file_path: str = Field(..., alias="filePath")
    violations: list[Violation] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}

    def to_json(self) -> str:
        """Serialize as one compact JSON object using the wire field names."""
        return self.model_dump_json(by_alias=True)
