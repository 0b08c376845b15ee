from __future__ import annotations

import json
from pathlib import Path

import pytest

from cucumber_parallel.config import GeneratorConfig, load_config, parse_config_mapping
from cucumber_parallel.utils.errors import Err, GeneratorError


def test_defaults_follow_plugin_parameters() -> None:
    cfg = GeneratorConfig()
    assert cfg.naming_scheme == "simple"
    assert cfg.cucumber_output_dir == "target/cucumber-parallel"
    assert cfg.output_formats == ["json"]
    assert cfg.glue_packages == []
    assert cfg.strict is True
    assert cfg.monochrome is False
    assert cfg.template_id == "junit"
    assert cfg.parallel_tag_prefix is None


def test_list_values_are_normalized() -> None:
    cfg = GeneratorConfig(tags=["@a", "@b"], format=["json", "html"], glue=["foo", " bar "])
    assert cfg.tags == '"@a","@b"'
    assert cfg.format == "json,html"
    assert cfg.glue_packages == ["foo", "bar"]


def test_blank_parallel_prefix_becomes_none() -> None:
    assert GeneratorConfig(parallel_tag_prefix="  ").parallel_tag_prefix is None
    assert GeneratorConfig(parallel_tag_prefix="@").parallel_tag_prefix is None


def test_parallel_prefix_accepts_leading_at() -> None:
    assert GeneratorConfig(parallel_tag_prefix=" @parallel ").parallel_tag_prefix == "parallel"
    assert GeneratorConfig(parallel_tag_prefix="parallel").parallel_tag_prefix == "parallel"


def test_testng_selects_testng_template() -> None:
    assert GeneratorConfig(use_testng=True).template_id == "testng"


def test_load_yaml_config_resolves_relative_directories(tmp_path: Path) -> None:
    path = tmp_path / "runners.yaml"
    path.write_text(
        "\n".join(
            [
                "cucumber_parallel:",
                "  features_directory: features",
                "  output_directory: out",
                "  naming_scheme: feature-title",
                "  tags: ['@smoke']",
                "  parallel_tag_prefix: parallel",
                "  glue: steps, hooks",
            ]
        ),
        encoding="utf-8",
    )

    cfg = load_config(path)

    assert cfg.features_directory == tmp_path / "features"
    assert cfg.output_directory == tmp_path / "out"
    assert cfg.naming_scheme == "feature-title"
    assert cfg.tags == '"@smoke"'
    assert cfg.glue_packages == ["steps", "hooks"]


def test_load_json_config(tmp_path: Path) -> None:
    path = tmp_path / "runners.json"
    path.write_text(json.dumps({"tags": '"@a,@b","@c"', "use_testng": True}), encoding="utf-8")

    cfg = load_config(path)

    assert cfg.tags == '"@a,@b","@c"'
    assert cfg.template_id == "testng"


def test_load_config_rejects_unknown_suffix(tmp_path: Path) -> None:
    path = tmp_path / "runners.toml"
    path.write_text("tags = 1", encoding="utf-8")

    with pytest.raises(GeneratorError) as exc:
        load_config(path)
    assert exc.value.code is Err.INVALID_CONFIG


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "runners.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(GeneratorError) as exc:
        load_config(path)
    assert exc.value.ctx["error"] == "top-level must be mapping"


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(GeneratorError) as exc:
        load_config(tmp_path / "absent.yaml")
    assert exc.value.code is Err.DATA_MISSING


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(GeneratorError) as exc:
        parse_config_mapping({"paralel_tag_prefix": "p"})
    assert exc.value.code is Err.INVALID_CONFIG


def test_naming_scheme_is_not_validated_at_load_time() -> None:
    # rejected by the generator before any runner is written
    assert parse_config_mapping({"naming_scheme": "camel"}).naming_scheme == "camel"
