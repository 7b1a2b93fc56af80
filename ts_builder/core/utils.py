"""Formatting helpers shared by builders, sections and the generator.

This module covers doc comment layout, indentation, item spacing and the
timestamps written into generated headers.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

import dateparser

from ..logging_config import get_logger

logger = get_logger(__name__)

SPACING_SEPARATORS = {
    "compact": "\n",
    "normal": "\n\n",
    "loose": "\n\n\n",
}

JSDOC_STYLES = ("single", "multi")

# Spaces per nesting level for every generated construct
INDENT_SIZE = 4


def as_lines(comment: Optional[Union[str, List[str]]]) -> List[str]:
    """Normalize a comment given as text or list of lines."""
    if not comment:
        return []
    if isinstance(comment, str):
        return comment.splitlines() or [comment]
    return [str(line) for line in comment]


def format_metadata_value(value: Any) -> str:
    """Render a metadata value for an ``@tag`` line."""
    if isinstance(value, datetime):
        return format_timestamp(value)
    return str(value)


def format_jsdoc(
    comment: Optional[Union[str, List[str]]],
    style: str = "multi",
    metadata: Optional[Dict[str, Any]] = None,
) -> str:
    """Format a JSDoc comment in single-line or multi-line style.

    Metadata entries become ``@key value`` tag lines, separated from the
    comment text by a blank line. Entries whose value is None are skipped.

    Args:
        comment: Comment text or list of comment lines.
        style: ``"single"`` for one ``/** ... */`` per line, ``"multi"`` for a block.
        metadata: Optional tags to append.

    Returns:
        The formatted comment, or an empty string when there is nothing to say.
    """
    comment_lines = as_lines(comment)
    metadata_lines = [
        f"@{key} {format_metadata_value(value)}"
        for key, value in (metadata or {}).items()
        if value is not None
    ]

    if not comment_lines and not metadata_lines:
        return ""

    all_lines = list(comment_lines)
    if comment_lines and metadata_lines:
        all_lines.append("")
    all_lines.extend(metadata_lines)

    if style == "single":
        return "\n".join(f"/** {line} */" for line in all_lines if line)

    body = [f" * {line}" if line else " *" for line in all_lines]
    return "\n".join(["/**", *body, " */"])


def format_doc_comment(lines: List[str]) -> str:
    """Format a declaration's doc comment: one line inline, several as a block."""
    if not lines:
        return ""
    if len(lines) == 1:
        return f"/** {lines[0]} */"
    return format_jsdoc(lines, "multi")


def format_section_comment(
    name: str,
    description: Optional[Union[str, List[str]]] = None,
    metadata: Optional[Dict[str, Any]] = None,
    style: str = "multi",
) -> str:
    """Format the header comment of a section."""
    return format_jsdoc([name, *as_lines(description)], style, metadata)


def format_section_end_comment(name: str) -> str:
    """Format the trailing marker of a section."""
    return f"// End {name}"


def indent(content: str, level: int = 1, size: int = INDENT_SIZE) -> str:
    """Indent every non-empty line of a block of text."""
    prefix = " " * (level * size)
    return "\n".join(prefix + line if line.strip() else line for line in content.split("\n"))


def get_spacing(style: str = "normal") -> str:
    """Return the separator placed between the items of a section."""
    return SPACING_SEPARATORS.get(style, SPACING_SEPARATORS["normal"])


def format_timestamp(value: Optional[Union[datetime, str]] = None) -> str:
    """Format a timestamp as ISO-8601 UTC with millisecond precision.

    Args:
        value: A datetime, a date string in any format dateparser understands,
            or None for the current time.

    Returns:
        Timestamp such as ``2024-05-01T12:00:00.000Z``. Strings that cannot be
        parsed are returned unchanged.
    """
    if value is None:
        moment = datetime.now(timezone.utc)
    elif isinstance(value, datetime):
        moment = value
    else:
        moment = dateparser.parse(value, settings={"RETURN_AS_TIMEZONE_AWARE": True, "TIMEZONE": "UTC"})
        if moment is None:
            logger.warning("Could not parse timestamp %r, keeping it verbatim", value)
            return value

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
