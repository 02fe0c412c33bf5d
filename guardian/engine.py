# Analysis engine: run every rule on every function and order the violations.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from guardian.config import get_enabled_rules
from guardian.extractor import parse_file
from guardian.findings.models import AnalysisResult, FunctionDescriptor, Violation
from guardian.parser import Dialect
from guardian.rules.base import Rule

logger = logging.getLogger(__name__)


def sort_violations(violations: Iterable[Violation]) -> list[Violation]:
    """Order by line, then column, then rule id. This order is part of the schema."""
    return sorted(violations, key=lambda v: v.sort_key())


def analyze(
    functions: Sequence[FunctionDescriptor],
    rules: Optional[Sequence[Rule]] = None,
) -> list[Violation]:
    """
    Evaluate rules against every function descriptor.

    Args:
        functions: Descriptors from the extractor, for one file.
        rules: Rules to run; defaults to the built-in rule set.

    Returns:
        All violations, sorted. An empty list means the file is clean.
    """
    if rules is None:
        rules = get_enabled_rules()

    violations: list[Violation] = []
    for fn in functions:
        for rule in rules:
            violation = rule.check(fn)
            if violation is not None:
                logger.debug(
                    "Rule %s fired on %s %r at %d:%d",
                    rule.id,
                    fn.role.value,
                    fn.name,
                    violation.location.line,
                    violation.location.column,
                )
                violations.append(violation)

    return sort_violations(violations)


def analyze_file(
    path: Path,
    dialect: Optional[Dialect] = None,
    rules: Optional[Sequence[Rule]] = None,
) -> AnalysisResult:
    """
    Analyze one source file end to end.

    The dialect is inferred from the extension when not given.

    Raises:
        AnalysisError: the file cannot be read or parsed.
    """
    functions = parse_file(path, dialect=dialect)
    violations = analyze(functions, rules=rules)
    logger.info("Analyzed %s: %d violation(s)", path, len(violations))
    return AnalysisResult(file_path=str(path), violations=violations)
