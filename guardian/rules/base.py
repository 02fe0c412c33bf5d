# Rule interface (abstract base class): defines the contract all rules must implement.
# Concrete rules (no_direct_api_in_component, no_markup_in_hook) subclass Rule and implement check().

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from guardian.findings.models import FunctionDescriptor, FunctionRef, Location, Violation


class Rule(ABC):
    """
    Abstract base class for all architecture rules.

    Subclasses must define:
    - id: str — unique rule identifier (e.g. "no-markup-in-hook")
    - name: str — human-readable rule name
    - check(fn) -> Optional[Violation] — judge one function descriptor

    The engine calls check() once per descriptor. A rule looks at nothing but
    the descriptor it is given and reports at most one violation for it.
    """

    id: str
    name: str
    message: str
    severity: str = "error"

    @abstractmethod
    def check(self, fn: FunctionDescriptor) -> Optional[Violation]:
        """
        Return a Violation if fn breaks this rule, otherwise None.

        Must not raise for a well-formed descriptor.
        """
        ...

    def violation(self, fn: FunctionDescriptor, location: Location) -> Violation:
        """Build this rule's violation for fn, pointing at location."""
        return Violation(
            rule_id=self.id,
            message=self.message,
            severity=self.severity,
            function=FunctionRef(name=fn.name, kind=fn.role),
            location=location,
        )
