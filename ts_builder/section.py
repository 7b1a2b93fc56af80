"""
Sections: named, documented groups of generated code.

A :class:`Section` queues declarations, statements and import registries as
:class:`CodeItem` entries. Rendering is two-phase: every non-import item is
rendered and scanned into a fresh usage tracker first, and only then are the
import registries reconciled against it and rendered.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from .builders import (
    DoWhileLoopBuilder,
    EnumBuilder,
    ForLoopBuilder,
    IfStatementBuilder,
    ImportOptions,
    ImportsBuilder,
    InterfaceBuilder,
    ObjectBuilder,
    SwitchStatementBuilder,
    TypeBuilder,
    WhileLoopBuilder,
)
from .core import syntax as ts
from .core.config import SectionOptions
from .core.printer import print_node
from .core.tracker import UsageTracker
from .core.utils import as_lines, format_section_comment, format_section_end_comment, get_spacing
from .logging_config import get_logger

logger = get_logger(__name__)


class ItemKind(Enum):
    """Kinds of code item a section can hold."""

    INTERFACE = "interface"
    TYPE = "type"
    ENUM = "enum"
    OBJECT = "object"
    IMPORT = "import"
    IF = "if"
    SWITCH = "switch"
    FOR = "for"
    WHILE = "while"
    DO_WHILE = "do_while"


@dataclass(frozen=True)
class CodeItem:
    """
    One queued declaration or statement.

    The payload is a syntax node, pre-rendered text, or (for imports) the
    live registry whose rendering waits for the usage scan.
    """

    kind: ItemKind
    name: str
    payload: Union[ts.Node, str, ImportsBuilder]

    @property
    def is_import(self) -> bool:
        return self.kind == ItemKind.IMPORT

    def render(self) -> str:
        """Render a non-import payload to text."""
        if isinstance(self.payload, str):
            return self.payload
        if isinstance(self.payload, ts.Node):
            return print_node(self.payload)
        raise TypeError(f"Import item '{self.name}' is rendered by its registry")


class Section:
    """A named section of a generated TypeScript document."""

    def __init__(self, name: str, options: Optional[SectionOptions] = None):
        """
        Initialize an empty section.

        Args:
            name: Section name, shown in the header and end comments
            options: Formatting options, defaults to :class:`SectionOptions` defaults
        """
        self.name = name
        self.options = options or SectionOptions()
        self._items: List[CodeItem] = []

    @property
    def items(self) -> List[CodeItem]:
        return list(self._items)

    def _export(self, export: Optional[bool]) -> bool:
        return self.options.export_all if export is None else export

    def _add(self, kind: ItemKind, name: str, payload) -> "Section":
        self._items.append(CodeItem(kind, name, payload))
        logger.debug("Section '%s': queued %s '%s'", self.name, kind.value, name)
        return self

    # Declarations

    def add_interface(self, name: str, callback: Callable[[InterfaceBuilder], Any]) -> "Section":
        builder = InterfaceBuilder(name, export=self.options.export_all)
        callback(builder)
        return self._add(ItemKind.INTERFACE, name, builder.generate_node())

    def add_type(
        self,
        name: str,
        type_or_callback: Union[str, Callable[[TypeBuilder], Any]],
        export: Optional[bool] = None,
        jsdoc: Optional[Union[str, List[str]]] = None,
    ) -> "Section":
        """
        Add a type alias.

        Args:
            name: Alias name
            type_or_callback: Type expression text, or a callback configuring a TypeBuilder
            export: Export the alias; defaults to the section's ``export_all``
            jsdoc: Doc comment for the alias

        Returns:
            The section, for chaining
        """
        if isinstance(type_or_callback, str):
            node = ts.TypeAliasDeclaration(
                name=ts.Identifier(name),
                type=ts.parse_type(type_or_callback),
                exported=self._export(export),
                jsdoc=as_lines(jsdoc),
            )
        else:
            builder = TypeBuilder(name, export=self._export(export))
            if jsdoc:
                builder.jsdoc(jsdoc)
            type_or_callback(builder)
            node = builder.generate_node()
        return self._add(ItemKind.TYPE, name, node)

    def add_enum(self, name: str, callback: Callable[[EnumBuilder], Any], const: bool = False) -> "Section":
        builder = EnumBuilder(name, export=self.options.export_all, const=const)
        callback(builder)
        return self._add(ItemKind.ENUM, name, builder.generate_node())

    def add_object(
        self,
        callback: Callable[[ObjectBuilder], Any],
        name: Optional[str] = None,
        export: Optional[bool] = None,
        as_const: bool = False,
        jsdoc: Optional[Union[str, List[str]]] = None,
    ) -> "Section":
        """
        Add an object literal, or a ``const`` declaration when named.

        Objects are stored pre-rendered; their text is scanned like any
        other item, including the content of string values.
        """
        builder = ObjectBuilder(name=name, export=self._export(export), as_const=as_const)
        if jsdoc:
            builder.jsdoc(jsdoc)
        callback(builder)
        return self._add(ItemKind.OBJECT, name or "anonymousObject", builder.generate())

    def add_imports(
        self,
        module_specifier: str,
        callback: Callable[[ImportsBuilder], Any],
        include_unused: bool = False,
        type_only: bool = False,
    ) -> "Section":
        """
        Declare imports from one module.

        Which bindings are emitted is decided when the section is generated.

        Args:
            module_specifier: Module to import from
            callback: Configures the registry's bindings and marks
            include_unused: Emit every declared binding
            type_only: Emit ``import type``

        Returns:
            The section, for chaining
        """
        builder = ImportsBuilder(module_specifier, ImportOptions(include_unused, type_only))
        callback(builder)
        return self._add(ItemKind.IMPORT, module_specifier, builder)

    # Statements

    def add_if(self, callback: Callable[[IfStatementBuilder], Any]) -> "Section":
        return self._add_statement(ItemKind.IF, IfStatementBuilder(), callback)

    def add_switch(self, callback: Callable[[SwitchStatementBuilder], Any]) -> "Section":
        return self._add_statement(ItemKind.SWITCH, SwitchStatementBuilder(), callback)

    def add_for(self, callback: Callable[[ForLoopBuilder], Any]) -> "Section":
        return self._add_statement(ItemKind.FOR, ForLoopBuilder(), callback)

    def add_while(self, callback: Callable[[WhileLoopBuilder], Any]) -> "Section":
        return self._add_statement(ItemKind.WHILE, WhileLoopBuilder(), callback)

    def add_do_while(self, callback: Callable[[DoWhileLoopBuilder], Any]) -> "Section":
        return self._add_statement(ItemKind.DO_WHILE, DoWhileLoopBuilder(), callback)

    def _add_statement(self, kind: ItemKind, builder, callback) -> "Section":
        callback(builder)
        return self._add(kind, kind.value, builder.generate_node())

    # Rendering

    def generate(self) -> str:
        """
        Render the section.

        Non-import items are rendered and scanned into a new usage tracker
        before any import registry is reconciled, so an import is kept
        whenever anything in the section references it, regardless of
        declaration order.

        Returns:
            Header comment, imports, content and optional end comment
        """
        imports = [item for item in self._items if item.is_import]
        content_items = [item for item in self._items if not item.is_import]
        if self.options.sort_items:
            content_items = sorted(content_items, key=lambda item: item.name)

        tracker = UsageTracker()
        content = []
        for item in content_items:
            text = item.render()
            if isinstance(item.payload, ts.Node):
                tracker.scan(item.payload)
            tracker.scan(text)
            content.append(text)
        tracker.freeze()

        logger.debug("Section '%s': %d identifier(s) referenced", self.name, len(tracker))

        import_lines = []
        for item in imports:
            rendered = item.payload.reconcile(tracker).render()
            if rendered:
                import_lines.append(rendered)
            else:
                logger.debug("Section '%s': dropped unused import from '%s'", self.name, item.name)

        body = [block for block in (
            "\n".join(import_lines),
            get_spacing(self.options.spacing).join(content),
        ) if block]

        parts = [
            format_section_comment(
                self.name,
                self.options.description,
                self.options.metadata,
                self.options.jsdoc_style,
            ),
        ]
        if body:
            parts.append("\n\n".join(body))
        if self.options.add_end_comment:
            parts.append(format_section_end_comment(self.name))

        return "\n".join(parts)
