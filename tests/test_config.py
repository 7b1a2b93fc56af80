"""Tests for configuration loading and formatting helpers."""

import json
import logging
from datetime import datetime, timezone

import pytest

from ts_builder.core.config import (
    ConfigError,
    GeneratorConfig,
    GlobalMetadata,
    SectionOptions,
    load_config,
    resolve_config,
    save_config,
)
from ts_builder.core.utils import format_jsdoc, format_timestamp


def test_from_dict_collects_extra_metadata() -> None:
    """Unknown metadata keys become extra header tags."""
    config = GeneratorConfig.from_dict({
        "global_metadata": {"project": "shop", "generatedAt": "2024-05-01T12:00:00Z", "team": "web"},
    })

    tags = config.global_metadata.as_tags()
    assert tags == {
        "generator": "ts-builder",
        "generatedAt": "2024-05-01T12:00:00.000Z",
        "project": "shop",
        "team": "web",
    }


def test_unknown_keys_are_rejected() -> None:
    """Unknown top-level or section keys raise ConfigError."""
    with pytest.raises(ConfigError):
        GeneratorConfig.from_dict({"sections": {}})
    with pytest.raises(ConfigError):
        SectionOptions().merged({"colour": "blue"})


def test_invalid_values_are_rejected() -> None:
    """Spacing and doc style values are validated."""
    with pytest.raises(ConfigError):
        SectionOptions(jsdoc_style="fancy").validate()
    with pytest.raises(ConfigError):
        SectionOptions().merged({"spacing": "roomy"})


def test_merged_keeps_unset_fields() -> None:
    """None overrides leave the default untouched."""
    base = SectionOptions(spacing="compact", metadata={"a": 1})
    merged = base.merged({"spacing": None, "order": 3})

    assert merged.spacing == "compact"
    assert merged.order == 3
    assert merged.metadata == {"a": 1}
    assert merged.metadata is not base.metadata


def test_save_and_load_round_trip(tmp_path) -> None:
    """A saved configuration loads back with the same values."""
    config = GeneratorConfig(
        section_defaults=SectionOptions(spacing="loose", export_all=True),
        global_metadata=GlobalMetadata(
            project="shop",
            generated_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
        ),
    )
    path = tmp_path / "ts-builder.json"
    save_config(config, path)

    loaded = load_config(path)
    assert loaded.section_defaults.spacing == "loose"
    assert loaded.section_defaults.export_all is True
    assert loaded.global_metadata.as_tags() == config.global_metadata.as_tags()


def test_load_config_errors(tmp_path) -> None:
    """Missing, non-JSON and non-object files raise ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(broken)

    listed = tmp_path / "list.json"
    listed.write_text(json.dumps([1, 2]), encoding="utf-8")
    with pytest.raises(ConfigError, match="JSON object"):
        load_config(listed)


def test_resolve_config_accepts_paths_and_dicts(tmp_path) -> None:
    """resolve_config loads paths, builds dicts and rejects other types."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"section_defaults": {"sort_items": True}}), encoding="utf-8")

    assert resolve_config(str(path)).section_defaults.sort_items is True
    assert resolve_config({}).section_defaults.sort_items is False
    with pytest.raises(ConfigError):
        resolve_config(42)


def test_format_timestamp_inputs(caplog) -> None:
    """Datetimes and date strings normalise to UTC; junk is kept verbatim."""
    assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)) == "2024-01-02T03:04:05.000Z"
    assert format_timestamp("2024-01-02 03:04:05") == "2024-01-02T03:04:05.000Z"

    with caplog.at_level(logging.WARNING, logger="ts_builder"):
        assert format_timestamp("###") == "###"
    assert "Could not parse timestamp" in caplog.text

    assert format_timestamp().endswith("Z")


def test_format_jsdoc_styles() -> None:
    """Multi style builds a block; single style one comment per line."""
    assert format_jsdoc("Title", "multi", {"a": 1}) == "/**\n * Title\n *\n * @a 1\n */"
    assert format_jsdoc(["One", "Two"], "single") == "/** One */\n/** Two */"
    assert format_jsdoc(None, "multi", {"skipped": None}) == ""
