"""
Minimal TypeScript syntax tree for code generation.

Nodes are plain dataclasses. Builders assemble them, the printer turns them
into text and the usage tracker walks them. Text supplied by callers
(conditions, statements, type expressions) is parsed shallowly: the text is
kept verbatim and the identifiers found in it are attached as child nodes.
"""

import re
from dataclasses import dataclass, field, fields
from typing import Iterator, List, Optional, Union

from .naming import TYPESCRIPT_RESERVED_WORDS


class Node:
    """Base class for every syntax node."""

    def iter_children(self) -> Iterator["Node"]:
        """Yield every direct child node, whatever the node kind."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Node):
                yield value
            elif isinstance(value, (list, tuple)):
                for item in value:
                    if isinstance(item, Node):
                        yield item


# Identifier-bearing nodes


@dataclass
class Identifier(Node):
    text: str


@dataclass
class QualifiedName(Node):
    """Dotted type name such as ``Module.Type``."""

    left: Union[Identifier, "QualifiedName"]
    right: Identifier

    def parts(self) -> List[str]:
        """Every component of the name, left to right."""
        if isinstance(self.left, QualifiedName):
            head = self.left.parts()
        else:
            head = [self.left.text]
        return head + [self.right.text]


@dataclass
class TypeReference(Node):
    type_name: Union[Identifier, QualifiedName]
    type_arguments: List[Node] = field(default_factory=list)


@dataclass
class PropertyAccess(Node):
    expression: Node
    name: Identifier


@dataclass
class CallExpression(Node):
    callee: Node
    arguments: List[Node] = field(default_factory=list)


# Literals and opaque text


@dataclass
class StringLiteral(Node):
    value: str


@dataclass
class NumericLiteral(Node):
    text: str


@dataclass
class Raw(Node):
    """Verbatim text plus the references found in it."""

    text: str
    references: List[Node] = field(default_factory=list)


# Type nodes


@dataclass
class LiteralType(Node):
    literal: Node


@dataclass
class ArrayType(Node):
    element_type: Node


@dataclass
class UnionType(Node):
    types: List[Node]


@dataclass
class IntersectionType(Node):
    types: List[Node]


@dataclass
class TupleType(Node):
    element_types: List[Node]


@dataclass
class TypeOperator(Node):
    operator: str
    type: Node


@dataclass
class TypeQuery(Node):
    expression: Node


@dataclass
class TypeParameter(Node):
    name: Identifier
    constraint: Optional[Node] = None
    default: Optional[Node] = None


# Declarations


@dataclass
class PropertySignature(Node):
    name: str
    type: Node
    optional: bool = False
    readonly: bool = False
    jsdoc: List[str] = field(default_factory=list)


@dataclass
class InterfaceDeclaration(Node):
    name: Identifier
    members: List[PropertySignature] = field(default_factory=list)
    heritage: List[Node] = field(default_factory=list)
    exported: bool = False
    jsdoc: List[str] = field(default_factory=list)


@dataclass
class TypeAliasDeclaration(Node):
    name: Identifier
    type: Node
    type_parameters: List[TypeParameter] = field(default_factory=list)
    exported: bool = False
    jsdoc: List[str] = field(default_factory=list)


@dataclass
class EnumMember(Node):
    name: str
    initializer: Node


@dataclass
class EnumDeclaration(Node):
    name: Identifier
    members: List[EnumMember] = field(default_factory=list)
    exported: bool = False
    const: bool = False
    jsdoc: List[str] = field(default_factory=list)


# Statements


@dataclass
class Block(Node):
    statements: List[Node] = field(default_factory=list)
    jsdoc: List[str] = field(default_factory=list)


@dataclass
class ExpressionStatement(Node):
    expression: Node


@dataclass
class ReturnStatement(Node):
    expression: Optional[Node] = None


@dataclass
class IfStatement(Node):
    condition: Node
    then_statement: Block
    else_statement: Optional[Union["IfStatement", Block]] = None
    jsdoc: List[str] = field(default_factory=list)


@dataclass
class CaseClause(Node):
    value: Node
    statements: List[Node] = field(default_factory=list)


@dataclass
class DefaultClause(Node):
    statements: List[Node] = field(default_factory=list)


@dataclass
class SwitchStatement(Node):
    expression: Node
    clauses: List[Node] = field(default_factory=list)
    jsdoc: List[str] = field(default_factory=list)


@dataclass
class ForStatement(Node):
    body: Block
    initializer: Optional[Node] = None
    condition: Optional[Node] = None
    incrementor: Optional[Node] = None
    jsdoc: List[str] = field(default_factory=list)


@dataclass
class WhileStatement(Node):
    condition: Node
    body: Block
    jsdoc: List[str] = field(default_factory=list)


@dataclass
class DoStatement(Node):
    body: Block
    condition: Node
    jsdoc: List[str] = field(default_factory=list)


# Shallow parsing

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
DOTTED_NAME_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*(?:\.[A-Za-z_$][A-Za-z0-9_$]*)+$")
NUMBER_PATTERN = re.compile(r"^[0-9]+(\.[0-9]+)?$")
# A whole single string literal type with no escapes, e.g. "dark" or 'dark'
STRING_TYPE_PATTERN = re.compile(r"^(?:\"[^\"\\]*\"|'[^'\\]*')$")

# A dotted path, optionally followed by an opening parenthesis
_REFERENCE_PATTERN = re.compile(
    r"(?<![\w$.])([A-Za-z_$][\w$]*(?:\s*\.\s*[A-Za-z_$][\w$]*)*)(\s*\()?"
)
LITERAL_PATTERN = re.compile(r"\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*'|`(?:[^`\\]|\\.)*`", re.S)


def _split_literals(text: str):
    """Split text into code segments and string literal nodes."""
    code_segments = []
    literals = []
    position = 0
    for match in LITERAL_PATTERN.finditer(text):
        code_segments.append(text[position:match.start()])
        literals.append(StringLiteral(match.group(0)[1:-1]))
        position = match.end()
    code_segments.append(text[position:])
    return code_segments, literals


def _reference_nodes(segment: str, as_types: bool) -> List[Node]:
    nodes: List[Node] = []
    for match in _REFERENCE_PATTERN.finditer(segment):
        parts = [part.strip() for part in match.group(1).split(".")]
        if len(parts) == 1 and parts[0] in TYPESCRIPT_RESERVED_WORDS:
            continue
        if as_types:
            nodes.append(TypeReference(qualified_name(parts)))
            continue
        expression: Node = Identifier(parts[0])
        for part in parts[1:]:
            expression = PropertyAccess(expression, Identifier(part))
        if match.group(2):
            expression = CallExpression(expression)
        nodes.append(expression)
    return nodes


def scan_references(text: str, as_types: bool = False) -> List[Node]:
    """
    Collect the references that appear in a fragment of code.

    Identifiers outside string literals become identifier, property access
    or call nodes (type references when ``as_types`` is set); string
    literals become ``StringLiteral`` nodes so their content stays visible
    to anything walking the tree.
    """
    code_segments, literals = _split_literals(text)
    nodes: List[Node] = []
    for segment in code_segments:
        nodes.extend(_reference_nodes(segment, as_types))
    nodes.extend(literals)
    return nodes


def qualified_name(parts: List[str]) -> Union[Identifier, QualifiedName]:
    """Build an identifier or qualified name from dotted components."""
    name: Union[Identifier, QualifiedName] = Identifier(parts[0])
    for part in parts[1:]:
        name = QualifiedName(name, Identifier(part))
    return name


def parse_expression(text: str) -> Node:
    """Parse an expression fragment into a minimal node."""
    text = text.strip()
    if IDENTIFIER_PATTERN.match(text) and text not in TYPESCRIPT_RESERVED_WORDS:
        return Identifier(text)
    return Raw(text, scan_references(text))


def parse_statement(text: str) -> Node:
    """Parse a statement fragment; the printer adds the terminating semicolon."""
    text = text.strip()
    if text.endswith(";"):
        text = text[:-1].rstrip()
    return ExpressionStatement(parse_expression(text))


def parse_type(text: str) -> Node:
    """
    Parse a type expression into a type node.

    Simple names, dotted names, literal types and ``T[]`` arrays get real
    nodes; anything more complex stays verbatim with its references attached.
    """
    text = text.strip()

    if IDENTIFIER_PATTERN.match(text):
        if text in ("true", "false"):
            return LiteralType(Raw(text))
        return TypeReference(Identifier(text))

    if DOTTED_NAME_PATTERN.match(text):
        return TypeReference(qualified_name(text.split(".")))

    if STRING_TYPE_PATTERN.match(text):
        return LiteralType(StringLiteral(text[1:-1]))

    if NUMBER_PATTERN.match(text):
        return LiteralType(NumericLiteral(text))

    if text.endswith("[]"):
        element = text[:-2].strip()
        if element:
            return ArrayType(parse_type(element))

    return Raw(text, scan_references(text, as_types=True))
