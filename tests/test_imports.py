"""Tests for the import registry."""

import logging

from ts_builder.builders.imports import BindingKind, ImportOptions, ImportsBuilder
from ts_builder.core.tracker import UsageTracker


def tracker_for(*fragments: str) -> UsageTracker:
    tracker = UsageTracker()
    for fragment in fragments:
        tracker.scan(fragment)
    return tracker.freeze()


def test_nothing_used_renders_empty() -> None:
    """A registry with no used binding renders nothing."""
    builder = ImportsBuilder("unused-module").named_multiple(["alpha", "beta"]).default("Gamma")

    assert builder.reconcile(UsageTracker()).render() == ""


def test_include_unused_renders_everything() -> None:
    """include_unused emits every declared binding even with an empty tracker."""
    builder = ImportsBuilder("lib", ImportOptions(include_unused=True))
    builder.default("lib").named("a").named("b", "c")

    assert builder.reconcile(UsageTracker()).render() == 'import lib, { a, b as c } from "lib";'


def test_explicit_marks_win_over_tracker() -> None:
    """Marked bindings survive reconciliation against an empty tracker."""
    builder = ImportsBuilder("styled-components")
    builder.default("styled").named("css").named("keyframes")
    builder.mark_default_used().mark_used("css")

    rendered = builder.reconcile(UsageTracker()).render()
    assert rendered == 'import styled, { css } from "styled-components";'


def test_reconcile_matches_local_name() -> None:
    """An aliased binding is found through its local name only."""
    builder = ImportsBuilder("./dates").named("format", "formatDate").named("parse", "parseDate")

    rendered = builder.reconcile(tracker_for('"formatDate(x)"', '"parse(y)"')).render()
    assert rendered == 'import { format as formatDate } from "./dates";'


def test_named_bindings_keep_declaration_order() -> None:
    """Named bindings are emitted in the order they were declared."""
    builder = ImportsBuilder("react", ImportOptions(include_unused=True))
    builder.named_multiple(["useState", "useEffect", "useContext"])

    assert builder.render() == 'import { useState, useEffect, useContext } from "react";'


def test_duplicate_named_requests_are_ignored() -> None:
    """Declaring the same binding twice keeps one."""
    builder = ImportsBuilder("m").named("a").named("a").named("a", "b")

    assert [(b.source_name, b.local_name) for b in builder.bindings] == [("a", "a"), ("a", "b")]


def test_replacing_default_logs_warning(caplog) -> None:
    """A second default import replaces the first and warns."""
    builder = ImportsBuilder("m")
    with caplog.at_level(logging.WARNING, logger="ts_builder"):
        builder.default("first").default("second")

    assert [b.local_name for b in builder.bindings] == ["second"]
    assert "replaced" in caplog.text


def test_namespace_and_named_render_separate_statements() -> None:
    """A namespace import gets its own statement next to named bindings."""
    builder = ImportsBuilder("lodash", ImportOptions(include_unused=True))
    builder.namespace("_").named("chunk")

    assert builder.render().split("\n") == [
        'import * as _ from "lodash";',
        'import { chunk } from "lodash";',
    ]


def test_namespace_takes_precedence_over_default() -> None:
    """A surviving namespace import suppresses the default import."""
    builder = ImportsBuilder("m", ImportOptions(include_unused=True)).default("d").namespace("ns")

    assert builder.render() == 'import * as ns from "m";'


def test_default_survives_when_namespace_unused() -> None:
    """The default import is emitted when the namespace import is dropped."""
    builder = ImportsBuilder("m").default("d").namespace("ns")

    assert builder.mark_default_used().reconcile(UsageTracker()).render() == 'import d from "m";'


def test_namespace_default_and_named_together() -> None:
    """With all three kinds surviving, the default is dropped and named get their own statement."""
    builder = ImportsBuilder("lodash", ImportOptions(include_unused=True))
    builder.namespace("_").default("lodash").named("chunk")

    assert builder.render().split("\n") == [
        'import * as _ from "lodash";',
        'import { chunk } from "lodash";',
    ]


def test_type_only_prefix() -> None:
    """type_only emits ``import type``."""
    builder = ImportsBuilder("./types").named("User").options(type_only=True)

    rendered = builder.reconcile(tracker_for("let u: User;")).render()
    assert rendered == 'import type { User } from "./types";'


def test_render_arguments_override_declared_options() -> None:
    """Options passed to render take precedence over declared ones."""
    builder = ImportsBuilder("m").named("a")

    assert builder.render(include_unused=True, type_only=True) == 'import type { a } from "m";'
    assert builder.render() == ""


def test_reconcile_is_repeatable() -> None:
    """A later reconciliation replaces an earlier one but keeps explicit marks."""
    builder = ImportsBuilder("m").named("a").named("b").mark_used("b")

    builder.reconcile(tracker_for('"a()"'))
    assert builder.render() == 'import { a, b } from "m";'

    builder.reconcile(UsageTracker())
    assert builder.render() == 'import { b } from "m";'


def test_mark_used_on_undeclared_name_is_noop() -> None:
    """Marking a name that was never declared changes nothing."""
    builder = ImportsBuilder("m").named("a").mark_used("zzz")

    assert all(not binding.used for binding in builder.bindings)
    assert builder.bindings[0].kind == BindingKind.NAMED
