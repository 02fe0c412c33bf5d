# Components must not call the network directly: flags fetch/axios calls in a component body.

from __future__ import annotations

from typing import Optional

from guardian.findings.models import FunctionDescriptor, Role, Violation
from guardian.rules.base import Rule


class NoDirectApiInComponentRule(Rule):
    """Reports a component that calls fetch/axios itself, at its first such call."""

    id = "no-direct-api-in-component"
    name = "Direct API call in component"
    message = "Component should not call the network API directly"
    severity = "error"

    def check(self, fn: FunctionDescriptor) -> Optional[Violation]:
        if fn.role is not Role.COMPONENT or not fn.api_calls:
            return None
        return self.violation(fn, fn.api_calls[0])
