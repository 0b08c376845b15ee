"""Configuration loader for YAML and JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from ..utils.errors import Err, GeneratorError
from .settings import GeneratorConfig

SECTION_KEY = "cucumber_parallel"


def _load_mapping(data: Any, *, path: Path) -> Mapping[str, Any]:
    if isinstance(data, Mapping):
        section = data.get(SECTION_KEY, data)
        if isinstance(section, Mapping):
            return section
    raise GeneratorError(
        Err.INVALID_CONFIG,
        ctx={"path": str(path), "error": "top-level must be mapping"},
    )


def _parse_file(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GeneratorError(Err.DATA_MISSING, ctx={"path": str(path)}, cause=exc)
    if suffix in {".yaml", ".yml"}:
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise GeneratorError(Err.INVALID_CONFIG, ctx={"path": str(path), "error": "invalid yaml"}, cause=exc)
        return _load_mapping(data or {}, path=path)
    if suffix == ".json":
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise GeneratorError(Err.INVALID_CONFIG, ctx={"path": str(path), "error": "invalid json"}, cause=exc)
        return _load_mapping(data, path=path)
    raise GeneratorError(
        Err.INVALID_CONFIG,
        ctx={"path": str(path), "error": f"unsupported config format {suffix or '<none>'}"},
    )


def parse_config_mapping(data: Mapping[str, Any], *, source: Path | str | None = None) -> GeneratorConfig:
    """Validate a raw mapping into a :class:`GeneratorConfig`.

    Relative directories are resolved against the directory holding ``source``.
    """

    payload = dict(data)
    if source is not None:
        base_dir = Path(source).parent
        for key in ("features_directory", "output_directory", "templates_root"):
            value = payload.get(key)
            if value is not None and not Path(str(value)).is_absolute():
                payload[key] = base_dir / str(value)
    try:
        return GeneratorConfig.model_validate(payload)
    except ValidationError as exc:
        raise GeneratorError(
            Err.INVALID_CONFIG,
            ctx={"source": str(source) if source else None, "errors": exc.errors(include_url=False)},
            cause=exc,
        )


def load_config(path: Path | str) -> GeneratorConfig:
    """Load a config file into a :class:`GeneratorConfig`."""

    config_path = Path(path)
    return parse_config_mapping(_parse_file(config_path), source=config_path)


__all__ = ["load_config", "parse_config_mapping", "SECTION_KEY"]
