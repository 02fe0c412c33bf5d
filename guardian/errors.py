# Fatal analysis failures: unreadable source files and unparsable syntax.

from __future__ import annotations

from pathlib import Path


class AnalysisError(Exception):
    """Base class for failures that abort the analysis of one file."""


class SourceReadError(AnalysisError):
    """The source file is missing or could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")


class SourceSyntaxError(AnalysisError):
    """
    The source could not be parsed under its dialect.

    line is 1-based and column is 0-based, same as Location.
    """

    def __init__(self, path: Path | None, line: int, column: int, detail: str) -> None:
        self.path = path
        self.line = line
        self.column = column
        self.detail = detail
        where = f"{path}:{line}:{column}" if path is not None else f"{line}:{column}"
        super().__init__(f"syntax error at {where}: {detail}")
