"""
Structural builders for TypeScript declarations and statements.
"""

from .base import Builder, BuilderError
from .enums import EnumBuilder
from .imports import BindingKind, ImportBinding, ImportOptions, ImportsBuilder
from .interface import InterfaceBuilder
from .objects import ObjectBuilder, stringify_value
from .statements import (
    BlockBuilder,
    DoWhileLoopBuilder,
    ForLoopBuilder,
    IfStatementBuilder,
    LoopBuilder,
    SwitchStatementBuilder,
    WhileLoopBuilder,
)
from .types import TypeBuilder

__all__ = [
    "Builder",
    "BuilderError",
    "BindingKind",
    "ImportBinding",
    "ImportOptions",
    "ImportsBuilder",
    "InterfaceBuilder",
    "TypeBuilder",
    "EnumBuilder",
    "ObjectBuilder",
    "stringify_value",
    "BlockBuilder",
    "IfStatementBuilder",
    "SwitchStatementBuilder",
    "LoopBuilder",
    "ForLoopBuilder",
    "WhileLoopBuilder",
    "DoWhileLoopBuilder",
]
