from __future__ import annotations

"""
Analyzer configuration: which rules run and how they are instantiated.

The rule set is fixed; this module is the single place that lists it. There
is no config file and no per-project override.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from guardian.rules.base import Rule
from guardian.rules.no_direct_api_in_component import NoDirectApiInComponentRule
from guardian.rules.no_markup_in_hook import NoMarkupInHookRule


@dataclass
class Config:
    """
    Analyzer configuration.

    Carries the list of rules the engine runs against every function.
    """

    rules: Sequence[Rule] = field(default_factory=list)


def get_default_config() -> Config:
    """Return the configuration with every built-in rule."""
    rules: List[Rule] = [
        NoDirectApiInComponentRule(),
        NoMarkupInHookRule(),
    ]
    return Config(rules=rules)


def get_enabled_rules(config: Config | None = None) -> Sequence[Rule]:
    """Return the rules from the given config (or the default config)."""
    if config is None:
        config = get_default_config()
    return config.rules
