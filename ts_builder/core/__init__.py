"""
Core code generation components.

Provides the syntax model, printer, templates, configuration and usage
tracking shared by the builders, sections and generator.
"""

from .config import (
    ConfigError,
    GeneratorConfig,
    GlobalMetadata,
    SectionOptions,
    load_config,
    resolve_config,
    save_config,
)
from .naming import NameSanitizer, NamingCase
from .printer import NodePrinter, PrintError, print_node, print_nodes
from .templates import TemplateEngine, TemplateError, get_default_template_engine
from .tracker import TrackerFrozenError, UsageTracker

__all__ = [
    # Configuration system
    "ConfigError",
    "GeneratorConfig",
    "GlobalMetadata",
    "SectionOptions",
    "load_config",
    "resolve_config",
    "save_config",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    # Printing
    "NodePrinter",
    "PrintError",
    "print_node",
    "print_nodes",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "get_default_template_engine",
    # Usage tracking
    "TrackerFrozenError",
    "UsageTracker",
]
