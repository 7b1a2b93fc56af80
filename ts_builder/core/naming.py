"""
Naming utilities for safe code generation.

Handles case conversions and duplicate-name resolution for identifiers
emitted into TypeScript, plus the reserved word list used by the shallow
expression scanner.
"""

import re
from typing import Set, Dict
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""
    SNAKE_CASE = "snake"      # user_name
    CAMEL_CASE = "camel"      # userName
    PASCAL_CASE = "pascal"    # UserName


# Keywords that never name an imported binding
TYPESCRIPT_RESERVED_WORDS = frozenset({
    'break', 'case', 'catch', 'class', 'const', 'continue', 'debugger',
    'default', 'delete', 'do', 'else', 'enum', 'export', 'extends', 'false',
    'finally', 'for', 'function', 'if', 'import', 'in', 'instanceof', 'new',
    'null', 'return', 'super', 'switch', 'this', 'throw', 'true', 'try',
    'typeof', 'var', 'void', 'while', 'with', 'as', 'implements', 'interface',
    'let', 'package', 'private', 'protected', 'public', 'static', 'yield',
    'await', 'async', 'of', 'keyof', 'readonly', 'undefined',
})


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Names that must never be produced verbatim
        """
        self.reserved_words = reserved_words or set()
        self._name_cache: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.PASCAL_CASE,
                      suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a name for safe use as a TypeScript identifier.

        The same input always maps to the same output for one sanitizer;
        distinct inputs that collide after conversion get a numeric suffix.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for conflicts

        Returns:
            Sanitized name safe for use
        """
        cache_key = f"{name}_{target_case.value}_{suffix_on_conflict}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        converted = self._convert_case(cleaned, target_case)

        # Case conversion strips the guard underscore from leading digits
        if not converted or converted[0].isdigit():
            converted = f"_{converted}"

        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._name_cache[cache_key] = final_name
        self._used_names.add(final_name)

        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r'[^a-zA-Z0-9_-]', '_', str(name))
        cleaned = cleaned.strip('_-')

        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = "value"

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return to_pascal_case(name)
        else:
            return name

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve naming conflicts with reserved words and existing names."""
        if name in self.reserved_words:
            name = f"{name}{suffix}"

        original_name = name
        counter = 1
        while name in self._used_names:
            name = f"{original_name}{suffix}{counter}"
            counter += 1

        return name


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    name = re.sub(r'[-\s]+', '_', str(name))

    # Split acronym runs from the following word: HTTPServer -> HTTP_Server
    name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)

    name = name.lower()
    name = re.sub(r'_+', '_', name)

    return name.strip('_')


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    parts = to_snake_case(name).split('_')
    if not parts:
        return name
    return parts[0] + ''.join(part.capitalize() for part in parts[1:])


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    parts = to_snake_case(name).split('_')
    return ''.join(part.capitalize() for part in parts if part)
