"""Tests for shallow parsing, naming, templates and logging setup."""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from ts_builder.core import syntax as ts
from ts_builder.core.naming import NameSanitizer, NamingCase, to_camel_case, to_pascal_case
from ts_builder.core.printer import NodePrinter, print_node
from ts_builder.core.templates import TemplateEngine, TemplateError
from ts_builder.logging_config import get_logger, setup_logging


def test_parse_type_shapes() -> None:
    """Simple type strings map onto dedicated nodes."""
    assert ts.parse_type("User") == ts.TypeReference(ts.Identifier("User"))
    assert ts.parse_type("Api.Response") == ts.TypeReference(
        ts.QualifiedName(ts.Identifier("Api"), ts.Identifier("Response"))
    )
    assert ts.parse_type("'on'") == ts.LiteralType(ts.StringLiteral("on"))
    assert ts.parse_type("42") == ts.LiteralType(ts.NumericLiteral("42"))
    assert ts.parse_type("true") == ts.LiteralType(ts.Raw("true"))
    assert ts.parse_type("User[]") == ts.ArrayType(ts.TypeReference(ts.Identifier("User")))


def test_complex_type_keeps_text_and_references() -> None:
    """Unmodelled type syntax is kept verbatim with its references attached."""
    node = ts.parse_type("Record<string, Api.Item>")

    assert isinstance(node, ts.Raw)
    assert print_node(node) == "Record<string, Api.Item>"
    names = [print_node(ref) for ref in node.references]
    assert names == ["Record", "string", "Api.Item"]


def test_scan_references_splits_literals() -> None:
    """String literal content becomes a StringLiteral node, not a reference."""
    nodes = ts.scan_references('log("fetchUser(id)") && client.get(url)')

    assert nodes == [
        ts.CallExpression(ts.Identifier("log")),
        ts.CallExpression(ts.PropertyAccess(ts.Identifier("client"), ts.Identifier("get"))),
        ts.Identifier("url"),
        ts.StringLiteral("fetchUser(id)"),
    ]


def test_reserved_words_are_not_identifiers() -> None:
    """Keywords parse to raw text without references."""
    assert ts.parse_expression("count") == ts.Identifier("count")
    assert ts.parse_expression("this") == ts.Raw("this", [])


def test_name_sanitizer_pascal_keys() -> None:
    """Values become unique PascalCase identifiers."""
    sanitizer = NameSanitizer()

    assert sanitizer.sanitize_name("in-progress") == "InProgress"
    assert sanitizer.sanitize_name("in_progress") == "InProgress_1"
    assert sanitizer.sanitize_name("404 page") == "_404Page"
    assert sanitizer.sanitize_name("user id", NamingCase.CAMEL_CASE) == "userId"


def test_case_helpers() -> None:
    """Case helpers split on acronyms and separators."""
    assert to_pascal_case("HTTPServer") == "HttpServer"
    assert to_camel_case("api-key") == "apiKey"


def test_setup_logging_installs_one_handler() -> None:
    """Repeated setup keeps a single rich handler and updates the level."""
    console = Console(file=None, quiet=True)
    logger = setup_logging(logging.DEBUG, console=console)
    setup_logging(logging.WARNING, console=console)

    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.WARNING
    assert get_logger("section").name == "ts_builder.section"

    for handler in handlers:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_parse_type_keeps_literal_unions_verbatim() -> None:
    """Text with several quoted literals is not mistaken for one string type."""
    for text in ("'active' | 'inactive'", '"light" | "dark"', "'it\\'s'"):
        node = ts.parse_type(text)
        assert isinstance(node, ts.Raw)
        assert print_node(node) == text

    assert ts.parse_type('"dark"') == ts.LiteralType(ts.StringLiteral("dark"))


def test_snake_case_sanitizing() -> None:
    """Snake case output still gets conflict suffixes."""
    sanitizer = NameSanitizer()

    assert sanitizer.sanitize_name("UserName", NamingCase.SNAKE_CASE) == "user_name"
    assert sanitizer.sanitize_name("user-name", NamingCase.SNAKE_CASE) == "user_name_1"


def test_template_engine_replacement_templates() -> None:
    """Templates passed to the engine replace the built-in ones."""
    engine = TemplateEngine({"enum.ts.j2": "enum {{ name }} { {{ members | join(', ') }} }"})
    printer = NodePrinter(template_engine=engine)
    node = ts.EnumDeclaration(ts.Identifier("Flag"), [ts.EnumMember("On", ts.NumericLiteral("1"))])

    assert printer.print(node) == "enum Flag {     On = 1 }"


def test_template_errors_name_the_template() -> None:
    """Rendering failures are re-raised as TemplateError."""
    engine = TemplateEngine({"broken.ts.j2": "{{ missing() }}"})

    with pytest.raises(TemplateError, match="broken.ts.j2"):
        engine.render_template("broken.ts.j2", {})

    with pytest.raises(TemplateError, match="absent.ts.j2"):
        engine.render_template("absent.ts.j2", {})
