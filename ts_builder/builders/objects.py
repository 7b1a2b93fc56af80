"""
Builder for object literals and ``const`` object declarations.

Objects are rendered straight to text rather than through the syntax tree:
property values are arbitrary Python data, and their layout is fixed.
"""

import json
from typing import Any, Callable, List, Optional, Tuple

from .base import Builder
from ..core import syntax as ts
from ..core.utils import INDENT_SIZE, format_doc_comment

OBJECT_INDENT = " " * INDENT_SIZE


def stringify_value(value: Any, level: int = 1) -> str:
    """
    Render a Python value as a TypeScript literal.

    Args:
        value: None, bool, number, string, list, tuple or dict
        level: Nesting depth of the enclosing object, for indentation

    Returns:
        TypeScript source for the value
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        return "[" + ", ".join(stringify_value(item, level) for item in value) + "]"
    if isinstance(value, dict):
        return _render_entries([f"{key}: {stringify_value(item, level + 1)}" for key, item in value.items()], level)
    return json.dumps(str(value), ensure_ascii=False)


def _render_entries(entries: List[str], level: int) -> str:
    if not entries:
        return "{}"
    inner = OBJECT_INDENT * level
    outer = OBJECT_INDENT * (level - 1)
    return "{\n" + ",\n".join(inner + entry for entry in entries) + "\n" + outer + "}"


class ObjectBuilder(Builder):
    """Fluent builder for an object literal."""

    def __init__(self, name: Optional[str] = None, export: bool = False, as_const: bool = False):
        super().__init__()
        self.name = name
        self.export = export
        self._as_const = as_const
        # (name, value, readonly); value is a nested ObjectBuilder or plain data
        self._properties: List[Tuple[str, Any, bool]] = []

    def property(self, name: str, value: Any, readonly: bool = False) -> "ObjectBuilder":
        """
        Add a property with a literal value.

        Args:
            name: Property key
            value: Python value, rendered with :func:`stringify_value`
            readonly: Mark the property with a ``/* readonly */`` comment

        Returns:
            The builder, for chaining
        """
        self._properties.append((name, value, readonly))
        return self

    def nested_object(
        self, name: str, callback: Callable[["ObjectBuilder"], Any], readonly: bool = False
    ) -> "ObjectBuilder":
        """Add a property whose value is configured by its own builder."""
        builder = ObjectBuilder()
        callback(builder)
        self._properties.append((name, builder, readonly))
        return self

    def as_const(self) -> "ObjectBuilder":
        """Append an ``as const`` assertion."""
        self._as_const = True
        return self

    def literal(self, level: int = 1) -> str:
        """Render just the object literal at the given nesting depth."""
        entries = []
        for name, value, readonly in self._properties:
            prefix = "/* readonly */ " if readonly else ""
            if isinstance(value, ObjectBuilder):
                rendered = value.literal(level + 1)
            else:
                rendered = stringify_value(value, level + 1)
            entries.append(f"{prefix}{name}: {rendered}")
        return _render_entries(entries, level)

    def generate(self) -> str:
        comment = format_doc_comment(self._comment_lines)
        literal = self.literal()

        if self.name:
            export = "export " if self.export else ""
            suffix = " as const" if self._as_const else ""
            code = f"{export}const {self.name} = {literal}{suffix};"
        elif self._as_const:
            code = f"({literal}) as const"
        else:
            code = literal

        return f"{comment}\n{code}" if comment else code

    def generate_node(self) -> ts.Raw:
        text = self.generate()
        return ts.Raw(text, ts.scan_references(text))
