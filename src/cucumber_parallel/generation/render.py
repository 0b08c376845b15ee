from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from jinja2 import Environment, StrictUndefined, Template

from cucumber_parallel.tags.expression import TagExpression, format_expression
from cucumber_parallel.types import TEMPLATE_IDS, TemplateId
from cucumber_parallel.utils.errors import Err, GeneratorError

TEMPLATE_SUFFIX = ".java.j2"

_JINJA = Environment(undefined=StrictUndefined, keep_trailing_newline=True)


def _quote_join(values: Tuple[str, ...]) -> str:
    return ", ".join(f'"{v}"' for v in values)


@dataclass(frozen=True)
class RunnerContext:
    """Typed values exposed to a runner template.

    Quoting and comma-joining happen only in :meth:`as_template_mapping`.
    """

    strict: bool
    feature_file: str
    reports: Tuple[str, ...]
    tags: TagExpression
    monochrome: bool
    cucumber_output_dir: str
    glue: Tuple[str, ...]
    file_counter: str
    class_name: str

    def as_template_mapping(self) -> Dict[str, Union[str, bool]]:
        return {
            "strict": self.strict,
            "featureFile": self.feature_file,
            "reports": _quote_join(self.reports),
            "tags": format_expression(self.tags),
            "monochrome": self.monochrome,
            "cucumberOutputDir": self.cucumber_output_dir,
            "glue": _quote_join(self.glue),
            "fileCounter": self.file_counter,
            "className": self.class_name,
        }


def report_specs(formats: list[str], cucumber_output_dir: str, file_counter: int) -> Tuple[str, ...]:
    """Build ``<formatter>:<outputDir>/<counter>.<formatter>`` for every formatter."""

    out_dir = cucumber_output_dir.replace("\\", "/")
    return tuple(f"{fmt}:{out_dir}/{file_counter}.{fmt}" for fmt in formats)


def _templates_root(default: Optional[Path] = None) -> Path:
    if default:
        return Path(default)
    return Path(__file__).resolve().parent.parent / "templates"


def template_path(template_id: str, *, templates_root: Optional[Path] = None) -> Path:
    if template_id not in TEMPLATE_IDS:
        raise GeneratorError(
            Err.INVALID_CONFIG,
            ctx={"template_id": template_id, "accepted": list(TEMPLATE_IDS)},
        )
    return _templates_root(templates_root) / f"{template_id}{TEMPLATE_SUFFIX}"


def load_template(
    template_id: TemplateId | str,
    *,
    templates_root: Optional[Path] = None,
    encoding: str = "utf-8",
) -> Template:
    """Compile the runner template for ``template_id`` read with ``encoding``."""

    path = template_path(template_id, templates_root=templates_root)
    if not path.exists():
        raise GeneratorError(Err.MISSING_TEMPLATE, ctx={"template_id": template_id, "path": str(path)})
    try:
        source = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise GeneratorError(Err.IO_ERROR, ctx={"op": "read", "path": str(path)}, cause=exc)
    return _JINJA.from_string(source)


class TemplateRenderer:
    """Renders :class:`RunnerContext` values with one fixed template."""

    def __init__(self, template_id: TemplateId | str, *, templates_root: Optional[Path] = None, encoding: str = "utf-8"):
        self.template_id = template_id
        self._template = load_template(template_id, templates_root=templates_root, encoding=encoding)

    def render(self, context: RunnerContext) -> str:
        return self._template.render(**context.as_template_mapping())


__all__ = [
    "RunnerContext",
    "TemplateRenderer",
    "load_template",
    "report_specs",
    "template_path",
]
