"""
Top-level generator assembling sections into one TypeScript document.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from .core.config import GeneratorConfig, SectionOptions, resolve_config
from .core.utils import format_jsdoc
from .logging_config import get_logger
from .section import Section

logger = get_logger(__name__)

DOCUMENT_TITLE = "Generated TypeScript code"


class Generator:
    """Ordered collection of sections rendered into one document."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None):
        """
        Initialize generator with optional configuration.

        Args:
            config: A GeneratorConfig, a configuration dict or a JSON file path
        """
        self.config = resolve_config(config)
        self._sections: List[Section] = []

        # Header tags are fixed at construction
        tags = self.config.global_metadata.as_tags()
        self._header = format_jsdoc(DOCUMENT_TITLE, "multi", tags) if tags else ""

    @property
    def sections(self) -> List[Section]:
        return list(self._sections)

    def section(
        self,
        name: str,
        callback: Optional[Callable[[Section], Any]] = None,
        options: Optional[Union[SectionOptions, Dict[str, Any]]] = None,
        **overrides: Any,
    ) -> "Generator":
        """
        Register a section and run its configuration callback.

        Args:
            name: Section name
            callback: Receives the new section to add items to
            options: Options replacing the configured section defaults,
                as a SectionOptions or a dict of overrides
            **overrides: Individual option overrides, e.g. ``order=1``

        Returns:
            The generator, for chaining
        """
        if isinstance(options, SectionOptions):
            section_options = options.merged(overrides)
        else:
            section_options = self.config.section_defaults.merged({**(options or {}), **overrides})

        section = Section(name, section_options)
        if callback is not None:
            callback(section)
        self._sections.append(section)

        logger.debug("Registered section '%s' with %d item(s)", name, len(section.items))
        return self

    def generate(self) -> str:
        """
        Render every section in order.

        Sections with an explicit ``order`` come first, lowest first; the
        rest follow in registration order.

        Returns:
            The complete document, ending with a newline
        """
        ordered = sorted(
            self._sections,
            key=lambda section: (section.options.order is None, section.options.order or 0),
        )

        parts = []
        if self._header:
            parts.append(self._header)
        if ordered:
            parts.append("\n\n".join(section.generate() for section in ordered))

        logger.debug("Generated document with %d section(s)", len(ordered))
        return "\n".join(parts) + "\n" if parts else ""
