"""
Builder for TypeScript type alias declarations.

Every method that sets the aliased type replaces the previous one; a
builder whose type was never set renders ``any``.
"""

from typing import Dict, List, Optional

from .base import Builder
from ..core import syntax as ts


class TypeBuilder(Builder):
    """Fluent builder for a ``type`` alias."""

    def __init__(self, name: str, export: bool = False):
        super().__init__()
        self.name = name
        self.export = export
        self._type: Optional[ts.Node] = None
        self._type_parameters: List[ts.TypeParameter] = []

    def primitive(self, type: str) -> "TypeBuilder":
        """Alias a primitive such as ``string`` or ``number``."""
        self._type = ts.parse_type(type)
        return self

    def reference(self, type: str) -> "TypeBuilder":
        """Alias another named type."""
        self._type = ts.parse_type(type)
        return self

    def union(self, types: List[str]) -> "TypeBuilder":
        self._type = ts.UnionType([ts.parse_type(t) for t in types])
        return self

    def intersection(self, types: List[str]) -> "TypeBuilder":
        self._type = ts.IntersectionType([ts.parse_type(t) for t in types])
        return self

    def array(self, element_type: str) -> "TypeBuilder":
        self._type = ts.ArrayType(ts.parse_type(element_type))
        return self

    def tuple(self, element_types: List[str]) -> "TypeBuilder":
        self._type = ts.TupleType([ts.parse_type(t) for t in element_types])
        return self

    def keyof(self, type: str) -> "TypeBuilder":
        self._type = ts.TypeOperator("keyof", ts.parse_type(type))
        return self

    def typeof(self, value: str) -> "TypeBuilder":
        """Alias the type of a value, e.g. ``typeof config``."""
        self._type = ts.TypeQuery(ts.qualified_name(value.strip().split(".")))
        return self

    def type_parameter(
        self, name: str, constraint: Optional[str] = None, default: Optional[str] = None
    ) -> "TypeBuilder":
        """
        Add a generic type parameter.

        Args:
            name: Parameter name, e.g. ``T``
            constraint: Type after ``extends``
            default: Type after ``=``

        Returns:
            The builder, for chaining
        """
        self._type_parameters.append(
            ts.TypeParameter(
                name=ts.Identifier(name),
                constraint=ts.parse_type(constraint) if constraint else None,
                default=ts.parse_type(default) if default else None,
            )
        )
        return self

    def add_type_parameters(self, parameters: List[Dict[str, str]]) -> "TypeBuilder":
        """Add several type parameters given as ``name``/``constraint``/``default`` dicts."""
        for parameter in parameters:
            self.type_parameter(
                parameter["name"],
                constraint=parameter.get("constraint"),
                default=parameter.get("default", parameter.get("default_type")),
            )
        return self

    def generate_node(self) -> ts.TypeAliasDeclaration:
        return ts.TypeAliasDeclaration(
            name=ts.Identifier(self.name),
            type=self._type if self._type is not None else ts.TypeReference(ts.Identifier("any")),
            type_parameters=list(self._type_parameters),
            exported=self.export,
            jsdoc=list(self._comment_lines),
        )
