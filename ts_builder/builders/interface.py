"""Builder for TypeScript interface declarations."""

from typing import List, Optional, Union

from .base import Builder
from ..core import syntax as ts
from ..core.utils import as_lines


class InterfaceBuilder(Builder):
    """Fluent builder for an ``interface`` declaration."""

    def __init__(self, name: str, export: bool = False):
        super().__init__()
        self.name = name
        self.export = export
        self._properties: List[ts.PropertySignature] = []
        self._extends: List[str] = []

    def property(
        self,
        name: str,
        type: str,
        optional: bool = False,
        readonly: bool = False,
        jsdoc: Optional[Union[str, List[str]]] = None,
    ) -> "InterfaceBuilder":
        """
        Add a property signature.

        Args:
            name: Property name
            type: Type expression, e.g. ``string`` or ``User[]``
            optional: Render as ``name?``
            readonly: Prefix with ``readonly``
            jsdoc: Doc comment for the property

        Returns:
            The builder, for chaining
        """
        self._properties.append(
            ts.PropertySignature(
                name=name,
                type=ts.parse_type(type),
                optional=optional,
                readonly=readonly,
                jsdoc=as_lines(jsdoc),
            )
        )
        return self

    def extends(self, names: Union[str, List[str]]) -> "InterfaceBuilder":
        """Add one or more base interfaces."""
        if isinstance(names, str):
            names = [names]
        self._extends.extend(names)
        return self

    def generate_node(self) -> ts.InterfaceDeclaration:
        return ts.InterfaceDeclaration(
            name=ts.Identifier(self.name),
            members=list(self._properties),
            heritage=[ts.parse_type(name) for name in self._extends],
            exported=self.export,
            jsdoc=list(self._comment_lines),
        )
