"""
Usage tracking for automatic import detection.

A :class:`UsageTracker` collects every identifier that appears to be
referenced by a section's generated code. Structured nodes are walked
exactly; free-form text is scanned with deliberately permissive regular
expressions. Marking a name as used when it merely looks like a reference
is the accepted failure mode, since dropping a needed import breaks the
generated code while an extra import does not.
"""

import re
from collections.abc import Iterable
from typing import Any, FrozenSet, Set

from . import syntax as ts
from ..logging_config import get_logger

logger = get_logger(__name__)

# Capitalized identifiers are candidate type or class references
TYPE_REFERENCE_PATTERN = re.compile(r"\b([A-Z][A-Za-z0-9_]*)\b")

IDIOM_PATTERNS = (
    re.compile(r":\s*([A-Za-z_][A-Za-z0-9_]*)"),  # type annotation
    re.compile(r"\bextends\s+([A-Za-z_][A-Za-z0-9_]*)"),
    re.compile(r"\bimplements\s+([A-Za-z_][A-Za-z0-9_]*)"),
    re.compile(r"\btypeof\s+([A-Za-z_][A-Za-z0-9_]*)"),
    re.compile(r"\bkeyof\s+([A-Za-z_][A-Za-z0-9_]*)"),
)

FUNCTION_CALL_PATTERN = re.compile(r"\b([A-Za-z_][A-Za-z0-9_]*)\s*\(")
IDENTIFIER_PATTERN = re.compile(r"\b([A-Za-z_][A-Za-z0-9_]*)\b")

# Never treated as bindings when found inside literal content
LITERAL_STOPLIST = frozenset({
    "const", "let", "var", "function", "return", "if", "else", "for",
    "while", "do", "switch", "case", "break", "continue", "true", "false",
    "null", "undefined",
})


class TrackerFrozenError(RuntimeError):
    """Raised when scanning into a tracker that is being reconciled against."""

    pass


class UsageTracker:
    """Set of identifiers referenced by one section's generated code."""

    def __init__(self):
        self._used: Set[str] = set()
        self._frozen = False

    def __len__(self) -> int:
        return len(self._used)

    def __contains__(self, name: object) -> bool:
        return name in self._used

    @property
    def frozen(self) -> bool:
        return self._frozen

    def scan(self, fragment: Any) -> "UsageTracker":
        """
        Record every identifier-like token in a fragment of code.

        Args:
            fragment: A syntax node, a string of code, or an iterable of either.
                Anything else is ignored.

        Returns:
            The tracker, for chaining
        """
        if self._frozen:
            raise TrackerFrozenError("Usage tracker is frozen; reset it before scanning again")

        before = len(self._used)
        if isinstance(fragment, ts.Node):
            self._scan_node(fragment)
        elif isinstance(fragment, str):
            self._scan_string(fragment)
        elif isinstance(fragment, Iterable):
            for item in fragment:
                self.scan(item)
            return self
        else:
            logger.debug("Ignoring fragment of type %s", type(fragment).__name__)
            return self

        logger.debug("Scan found %d new identifier(s), %d total", len(self._used) - before, len(self._used))
        return self

    def freeze(self) -> "UsageTracker":
        """Stop accepting scans; the set is read-only from here on."""
        self._frozen = True
        return self

    def is_used(self, name: str) -> bool:
        """Check if an identifier was seen."""
        return name in self._used

    def used_names(self) -> FrozenSet[str]:
        """Snapshot of every identifier seen so far."""
        return frozenset(self._used)

    def reset(self):
        """Forget everything and accept scans again."""
        self._used.clear()
        self._frozen = False

    # Structured nodes

    def _scan_node(self, root: ts.Node):
        stack = [root]
        while stack:
            node = stack.pop()

            if isinstance(node, ts.Identifier):
                self._used.add(node.text)
            elif isinstance(node, ts.QualifiedName):
                self._used.update(node.parts())
            elif isinstance(node, ts.TypeReference):
                self._add_name(node.type_name)
            elif isinstance(node, ts.PropertyAccess):
                self._add_name(node.expression)
            elif isinstance(node, ts.CallExpression):
                self._add_name(node.callee)
            elif isinstance(node, ts.Raw):
                self._scan_string(node.text)
            elif isinstance(node, ts.StringLiteral):
                self._scan_literal_content(node.value)

            stack.extend(node.iter_children())

    def _add_name(self, node: ts.Node):
        if isinstance(node, ts.Identifier):
            self._used.add(node.text)
        elif isinstance(node, ts.QualifiedName):
            self._used.update(node.parts())

    # Free-form text

    def _scan_string(self, code: str):
        # Each literal closes with the quote that opened it; content is scanned as code
        for match in ts.LITERAL_PATTERN.finditer(code):
            content = match.group(0)[1:-1]
            if content:
                self._scan_literal_content(content)

        self._used.update(TYPE_REFERENCE_PATTERN.findall(code))

        for pattern in IDIOM_PATTERNS:
            self._used.update(pattern.findall(code))

    def _scan_literal_content(self, content: str):
        names = FUNCTION_CALL_PATTERN.findall(content) + IDENTIFIER_PATTERN.findall(content)
        self._used.update(name for name in names if name not in LITERAL_STOPLIST)
