"""
Builders for blocks and control-flow statements.

Conditions, expressions and statements are given as TypeScript text and
parsed shallowly; only the identifiers they reference are modelled. Missing
required parts raise :class:`~ts_builder.builders.base.BuilderError` when
the statement is built.
"""

from typing import Any, Callable, List, Optional, Tuple

from .base import Builder, BuilderError
from ..core import syntax as ts

BlockCallback = Callable[["BlockBuilder"], Any]


def build_block(callback: BlockCallback) -> "BlockBuilder":
    """Run a callback against a fresh block builder."""
    block = BlockBuilder()
    callback(block)
    return block


class BlockBuilder(Builder):
    """Fluent builder for a ``{ ... }`` block of statements."""

    def __init__(self):
        super().__init__()
        self._statements: List[ts.Node] = []

    def add_statement(self, statement: str) -> "BlockBuilder":
        """Add a statement given as text; a trailing semicolon is optional."""
        self._statements.append(ts.parse_statement(statement))
        return self

    def add_if(self, callback: Callable[["IfStatementBuilder"], Any]) -> "BlockBuilder":
        return self._add_nested(IfStatementBuilder(), callback)

    def add_switch(self, callback: Callable[["SwitchStatementBuilder"], Any]) -> "BlockBuilder":
        return self._add_nested(SwitchStatementBuilder(), callback)

    def add_for(self, callback: Callable[["ForLoopBuilder"], Any]) -> "BlockBuilder":
        return self._add_nested(ForLoopBuilder(), callback)

    def add_while(self, callback: Callable[["WhileLoopBuilder"], Any]) -> "BlockBuilder":
        return self._add_nested(WhileLoopBuilder(), callback)

    def add_do_while(self, callback: Callable[["DoWhileLoopBuilder"], Any]) -> "BlockBuilder":
        return self._add_nested(DoWhileLoopBuilder(), callback)

    def add_return(self, expression: Optional[str] = None) -> "BlockBuilder":
        """Add a ``return`` statement, with or without a value."""
        value = ts.parse_expression(expression) if expression else None
        self._statements.append(ts.ReturnStatement(value))
        return self

    def _add_nested(self, builder: Builder, callback: Callable[[Any], Any]) -> "BlockBuilder":
        callback(builder)
        self._statements.append(builder.generate_node())
        return self

    def generate_node(self) -> ts.Block:
        return ts.Block(list(self._statements), list(self._comment_lines))


class IfStatementBuilder(Builder):
    """Fluent builder for ``if`` / ``else if`` / ``else`` chains."""

    def __init__(self):
        super().__init__()
        self._condition: Optional[str] = None
        self._then: Optional[BlockBuilder] = None
        self._else_ifs: List[Tuple[str, BlockBuilder]] = []
        self._else: Optional[BlockBuilder] = None

    def condition(self, condition: str) -> "IfStatementBuilder":
        self._condition = condition
        return self

    def then(self, callback: BlockCallback) -> "IfStatementBuilder":
        self._then = build_block(callback)
        return self

    def else_if(self, condition: str, callback: BlockCallback) -> "IfStatementBuilder":
        self._else_ifs.append((condition, build_block(callback)))
        return self

    def else_(self, callback: BlockCallback) -> "IfStatementBuilder":
        self._else = build_block(callback)
        return self

    def generate_node(self) -> ts.IfStatement:
        if not self._condition:
            raise BuilderError("Condition is required for if statement")
        if self._then is None:
            raise BuilderError("Then block is required for if statement")

        # Chain is assembled from the last clause backwards
        else_statement = self._else.generate_node() if self._else is not None else None
        for condition, block in reversed(self._else_ifs):
            else_statement = ts.IfStatement(
                ts.parse_expression(condition), block.generate_node(), else_statement
            )

        return ts.IfStatement(
            condition=ts.parse_expression(self._condition),
            then_statement=self._then.generate_node(),
            else_statement=else_statement,
            jsdoc=list(self._comment_lines),
        )


class SwitchStatementBuilder(Builder):
    """Fluent builder for ``switch`` statements."""

    def __init__(self):
        super().__init__()
        self._expression: Optional[str] = None
        self._cases: List[Tuple[str, BlockBuilder]] = []
        self._default: Optional[BlockBuilder] = None

    def expression(self, expression: str) -> "SwitchStatementBuilder":
        self._expression = expression
        return self

    def case(self, value: str, callback: BlockCallback) -> "SwitchStatementBuilder":
        """
        Add a ``case`` clause.

        Args:
            value: Case label as TypeScript text, e.g. ``"active"`` or ``Status.Active``
            callback: Configures the statements of the clause

        Returns:
            The builder, for chaining
        """
        self._cases.append((value, build_block(callback)))
        return self

    def default(self, callback: BlockCallback) -> "SwitchStatementBuilder":
        self._default = build_block(callback)
        return self

    def generate_node(self) -> ts.SwitchStatement:
        if not self._expression:
            raise BuilderError("Expression is required for switch statement")

        clauses: List[ts.Node] = [
            ts.CaseClause(ts.parse_expression(value), block.generate_node().statements)
            for value, block in self._cases
        ]
        if self._default is not None:
            clauses.append(ts.DefaultClause(self._default.generate_node().statements))

        return ts.SwitchStatement(
            expression=ts.parse_expression(self._expression),
            clauses=clauses,
            jsdoc=list(self._comment_lines),
        )


class LoopBuilder(Builder):
    """Base for loop builders; every loop needs a body."""

    def __init__(self):
        super().__init__()
        self._body: Optional[BlockBuilder] = None

    def body(self, callback: BlockCallback):
        self._body = build_block(callback)
        return self

    def _body_node(self) -> ts.Block:
        if self._body is None:
            raise BuilderError("Body is required for loop statement")
        return self._body.generate_node()


class ForLoopBuilder(LoopBuilder):
    """Fluent builder for C-style ``for`` loops; every header part is optional."""

    def __init__(self):
        super().__init__()
        self._init: Optional[str] = None
        self._condition: Optional[str] = None
        self._increment: Optional[str] = None

    def init(self, init: str) -> "ForLoopBuilder":
        self._init = init
        return self

    def condition(self, condition: str) -> "ForLoopBuilder":
        self._condition = condition
        return self

    def increment(self, increment: str) -> "ForLoopBuilder":
        self._increment = increment
        return self

    def generate_node(self) -> ts.ForStatement:
        def parse(text: Optional[str]) -> Optional[ts.Node]:
            return ts.parse_expression(text) if text else None

        return ts.ForStatement(
            body=self._body_node(),
            initializer=parse(self._init),
            condition=parse(self._condition),
            incrementor=parse(self._increment),
            jsdoc=list(self._comment_lines),
        )


class WhileLoopBuilder(LoopBuilder):
    """Fluent builder for ``while`` loops."""

    def __init__(self):
        super().__init__()
        self._condition: Optional[str] = None

    def condition(self, condition: str) -> "WhileLoopBuilder":
        self._condition = condition
        return self

    def generate_node(self) -> ts.WhileStatement:
        if not self._condition:
            raise BuilderError("Condition is required for while statement")
        return ts.WhileStatement(
            condition=ts.parse_expression(self._condition),
            body=self._body_node(),
            jsdoc=list(self._comment_lines),
        )


class DoWhileLoopBuilder(LoopBuilder):
    """Fluent builder for ``do ... while`` loops."""

    def __init__(self):
        super().__init__()
        self._condition: Optional[str] = None

    def condition(self, condition: str) -> "DoWhileLoopBuilder":
        self._condition = condition
        return self

    def generate_node(self) -> ts.DoStatement:
        if not self._condition:
            raise BuilderError("Condition is required for do-while statement")
        return ts.DoStatement(
            body=self._body_node(),
            condition=ts.parse_expression(self._condition),
            jsdoc=list(self._comment_lines),
        )
