"""
Import registry for one module specifier.

An :class:`ImportsBuilder` collects the bindings a section may need from a
module and decides at render time which of them to emit. A binding is
emitted when the caller marked it used, when reconciliation against a
:class:`~ts_builder.core.tracker.UsageTracker` found its local name, or when
unused imports are explicitly included.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional

from ..core.templates import render_template
from ..core.tracker import UsageTracker
from ..logging_config import get_logger

logger = get_logger(__name__)


class BindingKind(Enum):
    """Kinds of import binding."""

    NAMED = "named"
    DEFAULT = "default"
    NAMESPACE = "namespace"


@dataclass
class ImportBinding:
    """One requested import of one name from one module."""

    module_specifier: str
    kind: BindingKind
    local_name: str
    source_name: str
    used: bool = False
    explicit: bool = False

    @property
    def aliased(self) -> bool:
        return self.source_name != self.local_name

    def mark(self):
        self.used = True
        self.explicit = True

    def render(self) -> str:
        if self.kind == BindingKind.NAMESPACE:
            return f"* as {self.local_name}"
        if self.aliased:
            return f"{self.source_name} as {self.local_name}"
        return self.local_name


@dataclass
class ImportOptions:
    """Rendering options fixed at declaration time."""

    include_unused: bool = False
    type_only: bool = False


class ImportsBuilder:
    """Builder for the import statement(s) of one module."""

    def __init__(self, module_specifier: str, options: Optional[ImportOptions] = None):
        """
        Initialize an empty registry.

        Args:
            module_specifier: Module to import from, written double-quoted
            options: Rendering options, defaults to used bindings only
        """
        self.module_specifier = module_specifier
        self._options = replace(options) if options else ImportOptions()
        self._named: List[ImportBinding] = []
        self._default: Optional[ImportBinding] = None
        self._namespace: Optional[ImportBinding] = None

    @property
    def bindings(self) -> List[ImportBinding]:
        """Every declared binding: namespace, default, then named in declaration order."""
        result = [b for b in (self._namespace, self._default) if b is not None]
        result.extend(self._named)
        return result

    @property
    def import_options(self) -> ImportOptions:
        return self._options

    # Declaration

    def named(self, name: str, alias: Optional[str] = None) -> "ImportsBuilder":
        """
        Declare a named import.

        Args:
            name: Exported name in the source module
            alias: Local name, when different from ``name``

        Returns:
            The builder, for chaining
        """
        local_name = alias or name
        for binding in self._named:
            if binding.source_name == name and binding.local_name == local_name:
                return self

        self._named.append(
            ImportBinding(self.module_specifier, BindingKind.NAMED, local_name, name)
        )
        return self

    def named_multiple(self, names: Iterable[str]) -> "ImportsBuilder":
        """Declare several named imports without aliases."""
        for name in names:
            self.named(name)
        return self

    def default(self, name: str) -> "ImportsBuilder":
        """Declare the default import, replacing any previous one."""
        if self._default is not None and self._default.local_name != name:
            logger.warning(
                "Default import '%s' from '%s' replaced by '%s'",
                self._default.local_name, self.module_specifier, name,
            )
        if self._default is None or self._default.local_name != name:
            self._default = ImportBinding(self.module_specifier, BindingKind.DEFAULT, name, name)
        return self

    def namespace(self, name: str) -> "ImportsBuilder":
        """Declare the namespace import, replacing any previous one."""
        if self._namespace is not None and self._namespace.local_name != name:
            logger.warning(
                "Namespace import '%s' from '%s' replaced by '%s'",
                self._namespace.local_name, self.module_specifier, name,
            )
        if self._namespace is None or self._namespace.local_name != name:
            self._namespace = ImportBinding(self.module_specifier, BindingKind.NAMESPACE, name, name)
        return self

    def options(
        self, include_unused: Optional[bool] = None, type_only: Optional[bool] = None
    ) -> "ImportsBuilder":
        """Set rendering options; None leaves an option unchanged."""
        if include_unused is not None:
            self._options.include_unused = include_unused
        if type_only is not None:
            self._options.type_only = type_only
        return self

    # Usage

    def mark_used(self, name: str) -> "ImportsBuilder":
        """Mark the named binding(s) whose source or local name is ``name`` as used."""
        matched = False
        for binding in self._named:
            if name in (binding.source_name, binding.local_name):
                binding.mark()
                matched = True
        if not matched:
            logger.debug("mark_used('%s'): no such named import from '%s'", name, self.module_specifier)
        return self

    def mark_default_used(self) -> "ImportsBuilder":
        if self._default is not None:
            self._default.mark()
        return self

    def mark_namespace_used(self) -> "ImportsBuilder":
        if self._namespace is not None:
            self._namespace.mark()
        return self

    def reconcile(self, tracker: UsageTracker) -> "ImportsBuilder":
        """
        Resolve unmarked bindings against a usage tracker.

        Bindings marked by the caller stay used; every other binding is
        used exactly when the tracker saw its local name. Results of an
        earlier reconciliation are overwritten.

        Args:
            tracker: Tracker that has scanned all of the section's other code

        Returns:
            The builder, for chaining
        """
        for binding in self.bindings:
            if binding.explicit:
                continue
            binding.used = tracker.is_used(binding.local_name)
            logger.debug(
                "Import '%s' from '%s': %s",
                binding.local_name, self.module_specifier,
                "used" if binding.used else "unused",
            )
        return self

    # Rendering

    def render(self, include_unused: Optional[bool] = None, type_only: Optional[bool] = None) -> str:
        """
        Render the import statement(s).

        Args:
            include_unused: Emit every declared binding, overriding the declared option
            type_only: Emit ``import type``, overriding the declared option

        Returns:
            Import statement text, or an empty string when no binding survives
        """
        if include_unused is None:
            include_unused = self._options.include_unused
        if type_only is None:
            type_only = self._options.type_only

        def keep(binding: Optional[ImportBinding]) -> bool:
            return binding is not None and (include_unused or binding.used)

        namespace = self._namespace if keep(self._namespace) else None
        default = self._default if keep(self._default) else None
        named = [binding for binding in self._named if keep(binding)]

        # Namespace and default cannot coexist; the namespace wins
        if namespace is not None and default is not None:
            logger.debug(
                "Default import '%s' from '%s' dropped in favour of namespace '%s'",
                default.local_name, self.module_specifier, namespace.local_name,
            )
            default = None

        clauses = []
        if namespace is not None:
            clauses.append(namespace.render())

        # A namespace import cannot share its clause with named bindings
        rest = []
        if default is not None:
            rest.append(default.render())
        if named:
            rest.append("{ " + ", ".join(binding.render() for binding in named) + " }")
        if rest:
            clauses.append(", ".join(rest))

        return "\n".join(
            render_template("import.ts.j2", {
                "type_only": type_only,
                "clause": clause,
                "module": self.module_specifier,
            })
            for clause in clauses
        )

    def generate(self) -> str:
        """Render with the declared options."""
        return self.render()
