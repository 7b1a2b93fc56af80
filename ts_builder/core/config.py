"""
Configuration management for code generation.

Handles section options, global document metadata and loading both from
JSON files, providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .utils import JSDOC_STYLES, SPACING_SEPARATORS, format_timestamp
from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_GENERATOR_NAME = "ts-builder"


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class SectionOptions:
    """Formatting and metadata options for one section."""

    # Header comment
    description: Optional[Union[str, List[str]]] = None
    jsdoc_style: str = "multi"  # single, multi
    add_end_comment: bool = True

    # Declarations
    export_all: bool = False

    # Layout
    spacing: str = "normal"  # compact, normal, loose
    sort_items: bool = False
    order: Optional[int] = None

    # Rendered as @key value tags in the header
    metadata: Dict[str, Any] = field(default_factory=dict)

    def validate(self) -> "SectionOptions":
        """Raise ConfigError for values the renderer cannot honour."""
        if self.jsdoc_style not in JSDOC_STYLES:
            raise ConfigError(
                f"Invalid jsdoc_style: {self.jsdoc_style} (expected one of {', '.join(JSDOC_STYLES)})"
            )
        if self.spacing not in SPACING_SEPARATORS:
            raise ConfigError(
                f"Invalid spacing: {self.spacing} (expected one of {', '.join(SPACING_SEPARATORS)})"
            )
        if self.order is not None and not isinstance(self.order, int):
            raise ConfigError(f"Invalid order: {self.order!r} (expected an integer)")
        if not isinstance(self.metadata, dict):
            raise ConfigError("Section metadata must be a mapping")
        return self

    def merged(self, overrides: Optional[Dict[str, Any]] = None) -> "SectionOptions":
        """Return a copy with the given fields replaced."""
        if not overrides:
            return replace(self, metadata=dict(self.metadata))

        known_fields = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known_fields)
        if unknown:
            raise ConfigError(f"Unknown section option(s): {', '.join(unknown)}")

        values = {key: value for key, value in overrides.items() if value is not None or key == "order"}
        if "metadata" not in values:
            values["metadata"] = dict(self.metadata)
        return replace(self, **values).validate()


@dataclass
class GlobalMetadata:
    """Metadata written into the document header."""

    generator: Optional[str] = DEFAULT_GENERATOR_NAME
    generated_at: Optional[Union[str, datetime]] = field(default_factory=format_timestamp)
    project: Optional[str] = None

    # Additional custom metadata
    extra: Dict[str, Any] = field(default_factory=dict)

    def as_tags(self) -> Dict[str, Any]:
        """Header tags in output order; None values are dropped."""
        generated_at = self.generated_at
        if generated_at is not None:
            generated_at = format_timestamp(generated_at)

        tags = {
            "generator": self.generator,
            "generatedAt": generated_at,
            "project": self.project,
            **self.extra,
        }
        return {key: value for key, value in tags.items() if value is not None}


@dataclass
class GeneratorConfig:
    """Top-level configuration for a generator."""

    section_defaults: SectionOptions = field(default_factory=SectionOptions)
    global_metadata: GlobalMetadata = field(default_factory=GlobalMetadata)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "GeneratorConfig":
        """
        Build a configuration from a plain dictionary.

        Unknown keys under ``global_metadata`` become extra header tags;
        unknown top-level or section keys are rejected.

        Args:
            config_dict: Mapping with optional ``section_defaults`` and
                ``global_metadata`` entries

        Returns:
            Validated configuration
        """
        unknown = sorted(set(config_dict) - {"section_defaults", "global_metadata"})
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

        section_defaults = SectionOptions().merged(config_dict.get("section_defaults") or {})

        metadata_dict = dict(config_dict.get("global_metadata") or {})
        known_fields = {f.name for f in fields(GlobalMetadata)} - {"extra"}

        metadata_args = {}
        extra_args = dict(metadata_dict.pop("extra", {}) or {})

        for key, value in metadata_dict.items():
            if key in known_fields:
                metadata_args[key] = value
            elif key == "generatedAt":
                metadata_args["generated_at"] = value
            else:
                extra_args[key] = value

        return cls(
            section_defaults=section_defaults.validate(),
            global_metadata=GlobalMetadata(extra=extra_args, **metadata_args),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        section = {f.name: getattr(self.section_defaults, f.name) for f in fields(SectionOptions)}
        metadata = self.global_metadata
        generated_at = metadata.generated_at
        if isinstance(generated_at, datetime):
            generated_at = format_timestamp(generated_at)
        return {
            "section_defaults": section,
            "global_metadata": {
                "generator": metadata.generator,
                "generated_at": generated_at,
                "project": metadata.project,
                **metadata.extra,
            },
        }


def load_config(config_path: Union[str, Path]) -> GeneratorConfig:
    """Load generator configuration from a JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    if not path.suffix.lower() == '.json':
        raise ConfigError(f"Configuration file must be JSON: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")

    logger.debug("Loaded configuration from %s", path)
    return GeneratorConfig.from_dict(config)


def save_config(config: GeneratorConfig, output_path: Union[str, Path]):
    """Save configuration to a JSON file."""
    path = Path(output_path)

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2, ensure_ascii=False, default=str)
    except OSError as e:
        raise ConfigError(f"Failed to save configuration to {path}: {str(e)}") from e


def resolve_config(
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> GeneratorConfig:
    """Accept a configuration object, a dict or a JSON file path."""
    if config is None:
        return GeneratorConfig()
    if isinstance(config, GeneratorConfig):
        config.section_defaults.validate()
        return config
    if isinstance(config, dict):
        return GeneratorConfig.from_dict(config)
    if isinstance(config, (str, Path)):
        return load_config(config)
    raise ConfigError(f"Invalid config type: {type(config)}")
