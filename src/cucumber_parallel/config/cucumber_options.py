"""Override config values from a ``cucumber.options`` style command line.

Only the options that influence generated runners are honoured; everything
else (feature paths, ``--name``, ``--dry-run``...) is left to cucumber itself.
"""

from __future__ import annotations

import logging
import shlex
from typing import Any, Dict, List

from ..utils.errors import Err, GeneratorError
from .settings import GeneratorConfig

logger = logging.getLogger(__name__)

_TAGS = {"--tags", "-t"}
_GLUE = {"--glue", "-g"}
_FORMAT = {"--format", "--plugin", "-p", "-f"}
_FLAGS: Dict[str, tuple[str, bool]] = {
    "--strict": ("strict", True),
    "-s": ("strict", True),
    "--no-strict": ("strict", False),
    "--monochrome": ("monochrome", True),
    "-m": ("monochrome", True),
    "--no-monochrome": ("monochrome", False),
}


def parse_cucumber_options(options: str) -> Dict[str, Any]:
    """Translate a cucumber options string into config field overrides."""

    try:
        tokens = shlex.split(options or "")
    except ValueError as exc:
        raise GeneratorError(Err.INVALID_CONFIG, ctx={"cucumber_options": options}, cause=exc)

    tag_groups: List[str] = []
    glue: List[str] = []
    formats: List[str] = []
    overrides: Dict[str, Any] = {}

    it = iter(tokens)
    for token in it:
        if token in _TAGS or token in _GLUE or token in _FORMAT:
            value = next(it, None)
            if value is None:
                raise GeneratorError(
                    Err.INVALID_CONFIG,
                    ctx={"cucumber_options": options, "error": f"{token} requires a value"},
                )
            if token in _TAGS:
                tag_groups.append(value)
            elif token in _GLUE:
                glue.append(value)
            else:
                formats.append(value)
        elif token in _FLAGS:
            field, flag = _FLAGS[token]
            overrides[field] = flag
        else:
            logger.debug("Ignoring cucumber option %s", token)

    if tag_groups:
        overrides["tags"] = ",".join(f'"{group}"' for group in tag_groups)
    if glue:
        overrides["glue"] = glue
    if formats:
        overrides["format"] = formats
    return overrides


def apply_cucumber_options(config: GeneratorConfig, options: str | None) -> GeneratorConfig:
    """Return a copy of ``config`` with ``options`` applied on top."""

    if not options or not options.strip():
        return config
    overrides = parse_cucumber_options(options)
    if not overrides:
        return config
    merged = config.model_dump()
    merged.update(overrides)
    return GeneratorConfig.model_validate(merged)


__all__ = ["parse_cucumber_options", "apply_cucumber_options"]
