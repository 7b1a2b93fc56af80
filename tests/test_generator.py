"""Tests for the top-level generator."""

from datetime import datetime, timezone

import pytest

from ts_builder import ConfigError, Generator, GeneratorConfig, GlobalMetadata, create_generator


def fixed_config(**metadata) -> GeneratorConfig:
    metadata.setdefault("generated_at", datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))
    return GeneratorConfig(global_metadata=GlobalMetadata(**metadata))


def test_document_header_and_trailing_newline() -> None:
    """The document starts with the metadata comment and ends with a newline."""
    generator = create_generator(fixed_config(project="shop"))
    generator.section("Types", lambda s: s.add_type("Id", "string"))

    assert generator.generate() == (
        "/**\n"
        " * Generated TypeScript code\n"
        " *\n"
        " * @generator ts-builder\n"
        " * @generatedAt 2024-05-01T12:00:00.000Z\n"
        " * @project shop\n"
        " */\n"
        "/**\n"
        " * Types\n"
        " */\n"
        "type Id = string;\n"
        "// End Types\n"
    )


def test_no_metadata_means_no_document_header() -> None:
    """Without any metadata only the sections are emitted."""
    generator = Generator(fixed_config(generator=None, generated_at=None))
    generator.section("Empty")

    assert generator.generate() == "/**\n * Empty\n */\n// End Empty\n"


def test_sections_follow_order_then_insertion() -> None:
    """Explicit order sorts first; unordered sections keep registration order."""
    generator = Generator(fixed_config())
    generator.section("Last")
    generator.section("Second", order=2)
    generator.section("Unordered")
    generator.section("First", order=1)

    output = generator.generate()
    positions = [output.index(f"// End {name}") for name in ("First", "Second", "Last", "Unordered")]
    assert positions == sorted(positions)


def test_sections_are_separated_by_blank_line() -> None:
    """Consecutive sections have exactly one blank line between them."""
    generator = Generator(fixed_config(generator=None, generated_at=None))
    generator.section("A").section("B")

    assert generator.generate() == "/**\n * A\n */\n// End A\n\n/**\n * B\n */\n// End B\n"


def test_usage_is_not_shared_between_sections() -> None:
    """A reference in one section does not keep another section's import."""
    generator = Generator(fixed_config())
    generator.section("A", lambda s: (
        s.add_imports("./types", lambda i: i.named("User")),
        s.add_type("Id", "string"),
    ))
    generator.section("B", lambda s: (
        s.add_imports("./types", lambda i: i.named("User")),
        s.add_interface("Account", lambda b: b.property("owner", "User")),
    ))

    output = generator.generate()
    section_a, section_b = output.split("// End A")
    assert 'import { User } from "./types";' not in section_a
    assert 'import { User } from "./types";' in section_b


def test_generate_is_idempotent() -> None:
    """Two calls on an unchanged generator give byte-identical output."""
    generator = create_generator()
    generator.section("Hooks", lambda s: (
        s.add_imports("react", lambda i: i.named_multiple(["useState", "useMemo"])),
        s.add_object(lambda o: o.property("count", "useState(0)"), name="state"),
    ))

    assert generator.generate() == generator.generate()


def test_section_defaults_and_overrides() -> None:
    """Configured defaults apply to every section unless overridden."""
    generator = Generator({
        "section_defaults": {"add_end_comment": False, "export_all": True},
        "global_metadata": {"generator": None, "generated_at": None},
    })
    generator.section("Plain", lambda s: s.add_type("A", "string"))
    generator.section("Marked", lambda s: s.add_type("B", "string"), add_end_comment=True)

    output = generator.generate()
    assert "// End Plain" not in output
    assert "// End Marked" in output
    assert "export type A = string;" in output


def test_options_dict_and_overrides_combine() -> None:
    """An options dict and keyword overrides are merged onto the defaults."""
    generator = Generator(fixed_config())
    generator.section("S", options={"description": "About S"}, spacing="compact")

    section = generator.sections[0]
    assert section.options.description == "About S"
    assert section.options.spacing == "compact"
    assert section.options.jsdoc_style == "multi"


def test_invalid_override_raises() -> None:
    """Unknown spacing values are rejected when the section is registered."""
    generator = Generator(fixed_config())

    with pytest.raises(ConfigError):
        generator.section("Bad", spacing="roomy")
