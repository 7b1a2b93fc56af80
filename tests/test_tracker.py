"""Tests for the usage tracker."""

import pytest

from ts_builder.core import syntax as ts
from ts_builder.core.tracker import TrackerFrozenError, UsageTracker


def test_literal_content_skips_stoplist() -> None:
    """Calls inside a string literal are found and keywords are not."""
    tracker = UsageTracker()
    tracker.scan('"if (x) { doThing(); }"')

    assert tracker.is_used("doThing")
    assert tracker.is_used("x")
    assert not tracker.is_used("if")


def test_string_literal_node_content() -> None:
    """String literal nodes get the literal-content rule."""
    tracker = UsageTracker()
    tracker.scan(ts.StringLiteral("return formatDate(value)"))

    assert "formatDate" in tracker
    assert "value" in tracker
    assert "return" not in tracker


def test_qualified_name_marks_every_part() -> None:
    """A structured Foo.Bar reference marks both components."""
    tracker = UsageTracker()
    tracker.scan(ts.TypeReference(ts.qualified_name(["Foo", "Bar"])))

    assert tracker.is_used("Foo")
    assert tracker.is_used("Bar")


def test_capitalized_identifiers_are_types() -> None:
    """Capitalized words in plain code count as references."""
    tracker = UsageTracker()
    tracker.scan("const users = new Map();")

    assert tracker.is_used("Map")
    assert not tracker.is_used("users")


def test_type_idioms() -> None:
    """Annotations and type operators add their operand."""
    tracker = UsageTracker()
    tracker.scan("let a: settings; type K = keyof options; type Q = typeof config;")
    tracker.scan("class A extends base implements shape {}")

    for name in ("settings", "options", "config", "base", "shape"):
        assert tracker.is_used(name), name


def test_node_walk_reaches_nested_children() -> None:
    """Identifiers nested anywhere in a tree are found."""
    statement = ts.parse_statement("setState(computeNext(prev))")
    block = ts.Block([ts.ReturnStatement(ts.parse_expression("helper.run()")), statement])
    tracker = UsageTracker().scan(block)

    assert {"setState", "computeNext", "prev", "helper"} <= tracker.used_names()


def test_iterables_and_unknown_fragments() -> None:
    """Lists are scanned item by item and other objects are ignored."""
    tracker = UsageTracker()
    tracker.scan(["Alpha", ts.Identifier("beta"), 42, None])

    assert tracker.used_names() == frozenset({"Alpha", "beta"})


def test_frozen_tracker_rejects_scans() -> None:
    """Scanning after freeze raises until the tracker is reset."""
    tracker = UsageTracker().scan("Alpha").freeze()

    with pytest.raises(TrackerFrozenError):
        tracker.scan("Beta")

    tracker.reset()
    assert len(tracker) == 0
    tracker.scan("Beta")
    assert tracker.is_used("Beta")


def test_apostrophe_inside_double_quoted_literal() -> None:
    """A quote of another kind inside a literal does not end it."""
    tracker = UsageTracker()
    tracker.scan('onInit: "don\'t forget loadUser()"')

    assert tracker.is_used("loadUser")


def test_escaped_quotes_inside_literal() -> None:
    """Escaped quotes stay inside the literal being scanned."""
    tracker = UsageTracker()
    tracker.scan('label: "say \\"hi\\" then greet()", other: \'it\\\'s refresh()\'')

    assert tracker.is_used("greet")
    assert tracker.is_used("refresh")


def test_unclosed_quote_does_not_hide_later_literals() -> None:
    """A stray apostrophe in code leaves the following literal scannable."""
    tracker = UsageTracker()
    tracker.scan('// it\'s here\nconst x = "useStore()";')

    assert tracker.is_used("useStore")
