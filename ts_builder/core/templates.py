"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering with the
built-in TypeScript declaration templates and a quoting filter.
"""

from typing import Dict, Any, Optional

from jinja2 import DictLoader, Environment, select_autoescape


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


# Built-in templates for TypeScript declarations. Member bodies arrive
# pre-indented; templates only lay out the declaration skeleton.
INTERFACE_TEMPLATE = (
    "{% if jsdoc %}{{ jsdoc }}\n{% endif %}"
    "{% if exported %}export {% endif %}interface {{ name }}"
    "{% if heritage %} extends {{ heritage | join(', ') }}{% endif %} {\n"
    "{% for member in members %}{{ member }}\n{% endfor %}"
    "}"
)

ENUM_TEMPLATE = (
    "{% if jsdoc %}{{ jsdoc }}\n{% endif %}"
    "{% if exported %}export {% endif %}{% if const %}const {% endif %}enum {{ name }} {\n"
    "{% for member in members %}{{ member }}{% if not loop.last %},{% endif %}\n{% endfor %}"
    "}"
)

TYPE_ALIAS_TEMPLATE = (
    "{% if jsdoc %}{{ jsdoc }}\n{% endif %}"
    "{% if exported %}export {% endif %}type {{ name }}"
    "{% if type_parameters %}<{{ type_parameters | join(', ') }}>{% endif %}"
    " = {{ type }};"
)

IMPORT_TEMPLATE = (
    "import {% if type_only %}type {% endif %}{{ clause }} from {{ module | quote }};"
)

BUILTIN_TEMPLATES = {
    "interface.ts.j2": INTERFACE_TEMPLATE,
    "enum.ts.j2": ENUM_TEMPLATE,
    "type_alias.ts.j2": TYPE_ALIAS_TEMPLATE,
    "import.ts.j2": IMPORT_TEMPLATE,
}


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: Extra or replacement templates keyed by name
        """
        self._templates = dict(BUILTIN_TEMPLATES)
        if templates:
            self._templates.update(templates)
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        self._env = Environment(
            loader=DictLoader(self._templates),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            lstrip_blocks=True,
        )

        self._env.filters["quote"] = self._quote_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {str(e)}") from e

    # Template filters

    def _quote_filter(self, value: str) -> str:
        """Wrap a value in double quotes, escaping as a TypeScript string."""
        escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'


# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """Render one of the built-in templates with the default engine."""
    return get_default_template_engine().render_template(template_name, context)
