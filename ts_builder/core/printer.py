"""
Printer turning syntax nodes into TypeScript text.

Declarations are laid out with the built-in Jinja2 templates; types,
expressions and statements are printed directly.
"""

from typing import Iterable, List

from . import syntax as ts
from .templates import TemplateEngine, get_default_template_engine
from .utils import INDENT_SIZE, format_doc_comment, indent


class PrintError(Exception):
    """Raised when a node has no printed form."""

    pass


class NodePrinter:
    """Prints syntax nodes; one method per node kind."""

    def __init__(self, template_engine: TemplateEngine = None, indent_size: int = INDENT_SIZE):
        self.templates = template_engine or get_default_template_engine()
        self.indent_size = indent_size

    def print(self, node: ts.Node) -> str:
        method = getattr(self, f"_print_{type(node).__name__}", None)
        if method is None:
            raise PrintError(f"Cannot print node of kind {type(node).__name__}")
        return method(node)

    def _indent(self, text: str) -> str:
        return indent(text, 1, self.indent_size)

    def _with_jsdoc(self, jsdoc: List[str], text: str) -> str:
        comment = format_doc_comment(jsdoc)
        return f"{comment}\n{text}" if comment else text

    # Names and expressions

    def _print_Identifier(self, node: ts.Identifier) -> str:
        return node.text

    def _print_QualifiedName(self, node: ts.QualifiedName) -> str:
        return ".".join(node.parts())

    def _print_PropertyAccess(self, node: ts.PropertyAccess) -> str:
        return f"{self.print(node.expression)}.{node.name.text}"

    def _print_CallExpression(self, node: ts.CallExpression) -> str:
        arguments = ", ".join(self.print(argument) for argument in node.arguments)
        return f"{self.print(node.callee)}({arguments})"

    def _print_StringLiteral(self, node: ts.StringLiteral) -> str:
        escaped = node.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    def _print_NumericLiteral(self, node: ts.NumericLiteral) -> str:
        return node.text

    def _print_Raw(self, node: ts.Raw) -> str:
        return node.text

    # Types

    def _print_TypeReference(self, node: ts.TypeReference) -> str:
        name = self.print(node.type_name)
        if node.type_arguments:
            arguments = ", ".join(self.print(argument) for argument in node.type_arguments)
            return f"{name}<{arguments}>"
        return name

    def _print_LiteralType(self, node: ts.LiteralType) -> str:
        return self.print(node.literal)

    def _print_ArrayType(self, node: ts.ArrayType) -> str:
        element = self.print(node.element_type)
        compound = isinstance(node.element_type, (ts.UnionType, ts.IntersectionType, ts.TypeOperator))
        if compound or (
            isinstance(node.element_type, ts.Raw)
            and any(op in element for op in "|&")
            and not element.startswith("(")
        ):
            element = f"({element})"
        return f"{element}[]"

    def _print_UnionType(self, node: ts.UnionType) -> str:
        return " | ".join(self.print(t) for t in node.types)

    def _print_IntersectionType(self, node: ts.IntersectionType) -> str:
        return " & ".join(self.print(t) for t in node.types)

    def _print_TupleType(self, node: ts.TupleType) -> str:
        return "[" + ", ".join(self.print(t) for t in node.element_types) + "]"

    def _print_TypeOperator(self, node: ts.TypeOperator) -> str:
        return f"{node.operator} {self.print(node.type)}"

    def _print_TypeQuery(self, node: ts.TypeQuery) -> str:
        return f"typeof {self.print(node.expression)}"

    def _print_TypeParameter(self, node: ts.TypeParameter) -> str:
        text = node.name.text
        if node.constraint is not None:
            text += f" extends {self.print(node.constraint)}"
        if node.default is not None:
            text += f" = {self.print(node.default)}"
        return text

    # Declarations

    def _print_PropertySignature(self, node: ts.PropertySignature) -> str:
        readonly = "readonly " if node.readonly else ""
        optional = "?" if node.optional else ""
        text = f"{readonly}{node.name}{optional}: {self.print(node.type)};"
        return self._with_jsdoc(node.jsdoc, text)

    def _print_InterfaceDeclaration(self, node: ts.InterfaceDeclaration) -> str:
        return self.templates.render_template("interface.ts.j2", {
            "jsdoc": format_doc_comment(node.jsdoc),
            "exported": node.exported,
            "name": node.name.text,
            "heritage": [self.print(h) for h in node.heritage],
            "members": [self._indent(self.print(m)) for m in node.members],
        })

    def _print_TypeAliasDeclaration(self, node: ts.TypeAliasDeclaration) -> str:
        return self.templates.render_template("type_alias.ts.j2", {
            "jsdoc": format_doc_comment(node.jsdoc),
            "exported": node.exported,
            "name": node.name.text,
            "type_parameters": [self.print(p) for p in node.type_parameters],
            "type": self.print(node.type),
        })

    def _print_EnumMember(self, node: ts.EnumMember) -> str:
        return f"{node.name} = {self.print(node.initializer)}"

    def _print_EnumDeclaration(self, node: ts.EnumDeclaration) -> str:
        return self.templates.render_template("enum.ts.j2", {
            "jsdoc": format_doc_comment(node.jsdoc),
            "exported": node.exported,
            "const": node.const,
            "name": node.name.text,
            "members": [self._indent(self.print(m)) for m in node.members],
        })

    # Statements

    def _print_body(self, statements: Iterable[ts.Node]) -> str:
        lines = [self._indent(self.print(statement)) for statement in statements]
        if not lines:
            return "{\n}"
        return "{\n" + "\n".join(lines) + "\n}"

    def _print_Block(self, node: ts.Block) -> str:
        return self._with_jsdoc(node.jsdoc, self._print_body(node.statements))

    def _print_ExpressionStatement(self, node: ts.ExpressionStatement) -> str:
        text = self.print(node.expression)
        if text.endswith(("}", ";")):
            return text
        return f"{text};"

    def _print_ReturnStatement(self, node: ts.ReturnStatement) -> str:
        if node.expression is None:
            return "return;"
        return f"return {self.print(node.expression)};"

    def _print_if_chain(self, node: ts.IfStatement) -> str:
        text = f"if ({self.print(node.condition)}) {self._print_body(node.then_statement.statements)}"
        if isinstance(node.else_statement, ts.IfStatement):
            text += f" else {self._print_if_chain(node.else_statement)}"
        elif node.else_statement is not None:
            text += f" else {self._print_body(node.else_statement.statements)}"
        return text

    def _print_IfStatement(self, node: ts.IfStatement) -> str:
        return self._with_jsdoc(node.jsdoc, self._print_if_chain(node))

    def _print_CaseClause(self, node: ts.CaseClause) -> str:
        lines = [f"case {self.print(node.value)}:"]
        lines.extend(self._indent(self.print(statement)) for statement in node.statements)
        return "\n".join(lines)

    def _print_DefaultClause(self, node: ts.DefaultClause) -> str:
        lines = ["default:"]
        lines.extend(self._indent(self.print(statement)) for statement in node.statements)
        return "\n".join(lines)

    def _print_SwitchStatement(self, node: ts.SwitchStatement) -> str:
        text = f"switch ({self.print(node.expression)}) {self._print_body(node.clauses)}"
        return self._with_jsdoc(node.jsdoc, text)

    def _print_ForStatement(self, node: ts.ForStatement) -> str:
        parts = [
            self.print(part) if part is not None else ""
            for part in (node.initializer, node.condition, node.incrementor)
        ]
        header = parts[0]
        for part in parts[1:]:
            header += f"; {part}" if part else ";"
        text = f"for ({header}) {self._print_body(node.body.statements)}"
        return self._with_jsdoc(node.jsdoc, text)

    def _print_WhileStatement(self, node: ts.WhileStatement) -> str:
        text = f"while ({self.print(node.condition)}) {self._print_body(node.body.statements)}"
        return self._with_jsdoc(node.jsdoc, text)

    def _print_DoStatement(self, node: ts.DoStatement) -> str:
        text = f"do {self._print_body(node.body.statements)} while ({self.print(node.condition)});"
        return self._with_jsdoc(node.jsdoc, text)


_default_printer = None


def get_printer() -> NodePrinter:
    """Get the shared default printer."""
    global _default_printer
    if _default_printer is None:
        _default_printer = NodePrinter()
    return _default_printer


def print_node(node: ts.Node) -> str:
    """Print a single node to text."""
    return get_printer().print(node)


def print_nodes(nodes: Iterable[ts.Node], separator: str = "\n") -> str:
    """Print several nodes joined by a separator."""
    return separator.join(print_node(node) for node in nodes)
