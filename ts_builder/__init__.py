"""
ts_builder - fluent generation of TypeScript source organised in sections.

Imports declared in a section are emitted only when the section's other code
references them, so callers can declare imports freely.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .builders import (
    BlockBuilder,
    BuilderError,
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
from .core.config import (
    ConfigError,
    GeneratorConfig,
    GlobalMetadata,
    SectionOptions,
    load_config,
    save_config,
)
from .core.templates import TemplateError
from .core.tracker import UsageTracker
from .generator import Generator
from .logging_config import setup_logging
from .section import CodeItem, ItemKind, Section

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def create_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> Generator:
    """
    Create a generator.

    Args:
        config: A GeneratorConfig, a configuration dict or a JSON file path

    Returns:
        New generator with no sections
    """
    return Generator(config)


__all__ = [
    "create_generator",
    "Generator",
    "Section",
    "CodeItem",
    "ItemKind",
    # Configuration
    "GeneratorConfig",
    "GlobalMetadata",
    "SectionOptions",
    "ConfigError",
    "load_config",
    "save_config",
    # Builders
    "InterfaceBuilder",
    "TypeBuilder",
    "EnumBuilder",
    "ObjectBuilder",
    "ImportsBuilder",
    "ImportOptions",
    "BlockBuilder",
    "IfStatementBuilder",
    "SwitchStatementBuilder",
    "ForLoopBuilder",
    "WhileLoopBuilder",
    "DoWhileLoopBuilder",
    "BuilderError",
    "TemplateError",
    "UsageTracker",
    "setup_logging",
]
