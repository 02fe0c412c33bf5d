"""Unit tests for the built-in rules."""

from guardian.config import get_default_config, get_enabled_rules
from guardian.findings.models import FunctionDescriptor, Location, Role
from guardian.rules.no_direct_api_in_component import NoDirectApiInComponentRule
from guardian.rules.no_markup_in_hook import NoMarkupInHookRule


def _fn(name, role, api_calls=(), jsx_returns=()):
    return FunctionDescriptor(
        name=name,
        role=role,
        location=Location(line=1, column=0),
        api_calls=tuple(api_calls),
        jsx_returns=tuple(jsx_returns),
    )


class TestNoDirectApiInComponent:
    rule = NoDirectApiInComponentRule()

    def test_component_without_calls(self):
        assert self.rule.check(_fn("Widget", Role.COMPONENT)) is None

    def test_component_with_calls_reports_first(self):
        fn = _fn(
            "Widget",
            Role.COMPONENT,
            api_calls=[Location(line=3, column=2), Location(line=7, column=4)],
        )
        violation = self.rule.check(fn)
        assert violation is not None
        assert violation.rule_id == "no-direct-api-in-component"
        assert violation.severity == "error"
        assert violation.location == Location(line=3, column=2)
        assert violation.function.name == "Widget"
        assert violation.function.kind is Role.COMPONENT
        assert violation.message

    def test_hooks_and_utilities_may_call_apis(self):
        calls = [Location(line=2, column=0)]
        assert self.rule.check(_fn("useUser", Role.HOOK, api_calls=calls)) is None
        assert self.rule.check(_fn("loadUser", Role.UTILITY, api_calls=calls)) is None

    def test_markup_does_not_matter(self):
        fn = _fn("Widget", Role.COMPONENT, jsx_returns=[Location(line=2, column=9)])
        assert self.rule.check(fn) is None


class TestNoMarkupInHook:
    rule = NoMarkupInHookRule()

    def test_hook_without_markup(self):
        assert self.rule.check(_fn("useData", Role.HOOK)) is None

    def test_hook_with_markup_reports_first(self):
        fn = _fn(
            "useBadge",
            Role.HOOK,
            jsx_returns=[Location(line=5, column=11), Location(line=9, column=4)],
        )
        violation = self.rule.check(fn)
        assert violation is not None
        assert violation.rule_id == "no-markup-in-hook"
        assert violation.severity == "error"
        assert violation.location == Location(line=5, column=11)
        assert violation.function.kind is Role.HOOK

    def test_components_may_return_markup(self):
        fn = _fn("Badge", Role.COMPONENT, jsx_returns=[Location(line=1, column=20)])
        assert self.rule.check(fn) is None

    def test_api_calls_do_not_matter(self):
        fn = _fn("useData", Role.HOOK, api_calls=[Location(line=2, column=2)])
        assert self.rule.check(fn) is None


def test_default_config_has_both_rules():
    ids = [rule.id for rule in get_enabled_rules(get_default_config())]
    assert ids == ["no-direct-api-in-component", "no-markup-in-hook"]


def test_get_enabled_rules_without_config():
    assert len(get_enabled_rules()) == 2
