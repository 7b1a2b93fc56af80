"""Builder for TypeScript enum declarations."""

from typing import List, Union

from .base import Builder
from ..core import syntax as ts
from ..core.naming import NameSanitizer, NamingCase


class EnumBuilder(Builder):
    """Fluent builder for an ``enum`` or ``const enum`` declaration."""

    def __init__(self, name: str, export: bool = False, const: bool = False):
        super().__init__()
        self.name = name
        self.export = export
        self.const = const
        self._members: List[ts.EnumMember] = []
        self._sanitizer = NameSanitizer()

    def member(self, key: str, value: Union[str, int, float]) -> "EnumBuilder":
        """
        Add a member with an explicit initializer.

        Args:
            key: Member name
            value: Strings are emitted quoted, numbers as numeric literals

        Returns:
            The builder, for chaining
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            initializer = ts.StringLiteral(str(value))
        else:
            initializer = ts.NumericLiteral(repr(value))

        if not ts.IDENTIFIER_PATTERN.match(key):
            key = f'"{key}"'
        self._members.append(ts.EnumMember(key, initializer))
        return self

    def values(self, values: List[str]) -> "EnumBuilder":
        """Add string members keyed by the PascalCase form of each value."""
        for value in values:
            key = self._sanitizer.sanitize_name(value, NamingCase.PASCAL_CASE)
            self.member(key, value)
        return self

    def generate_node(self) -> ts.EnumDeclaration:
        return ts.EnumDeclaration(
            name=ts.Identifier(self.name),
            members=list(self._members),
            exported=self.export,
            const=self.const,
            jsdoc=list(self._comment_lines),
        )
