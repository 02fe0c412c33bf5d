# Hooks must not produce markup: flags a hook that returns JSX.

from __future__ import annotations

from typing import Optional

from guardian.findings.models import FunctionDescriptor, Role, Violation
from guardian.rules.base import Rule


class NoMarkupInHookRule(Rule):
    """Reports a hook that returns JSX, at its first markup return."""

    id = "no-markup-in-hook"
    name = "Markup returned from hook"
    message = "Hooks must not return markup"
    severity = "error"

    def check(self, fn: FunctionDescriptor) -> Optional[Violation]:
        if fn.role is not Role.HOOK or not fn.jsx_returns:
            return None
        return self.violation(fn, fn.jsx_returns[0])
