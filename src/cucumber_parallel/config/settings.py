from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..tags.expression import format_tag_list
from ..types import TemplateId


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in str(value or "").split(",") if part.strip()]


class GeneratorConfig(BaseModel):
    """Build configuration for runner generation.

    Attributes:
        features_directory: Root searched recursively for ``*.feature`` files.
        output_directory: Where generated runner sources are written.
        cucumber_output_dir: Report directory referenced by each runner's formatters.
        encoding: Encoding used for feature files, templates and generated sources.
        naming_scheme: ``simple`` or ``feature-title``. Validated when generation starts.
        tags: Quoted tag expression (``"@a,@b","@c"``); a list of tags is also accepted.
        parallel_tag_prefix: Tags starting with this prefix get a runner of their own.
        format: Comma-separated cucumber formatters.
        glue: Comma-separated glue packages.
        filter_features_by_tags: Skip feature files that cannot match ``tags``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    features_directory: Path = Path("src/test/resources/features")
    output_directory: Path = Path("target/generated-test-sources/cucumber")
    cucumber_output_dir: str = "target/cucumber-parallel"
    encoding: str = "UTF-8"
    naming_scheme: str = "simple"
    tags: str = ""
    parallel_tag_prefix: Optional[str] = None
    format: str = "json"
    glue: str = ""
    strict: bool = True
    monochrome: bool = False
    use_testng: bool = False
    filter_features_by_tags: bool = False
    templates_root: Optional[Path] = Field(default=None, description="Override for bundled runner templates")

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Union[str, List[str], None]) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return format_tag_list([str(v).strip() for v in value if str(v).strip()])
        return str(value)

    @field_validator("format", "glue", mode="before")
    @classmethod
    def _join_lists(cls, value: Union[str, List[str], None]) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return ",".join(str(v).strip() for v in value if str(v).strip())
        return str(value)

    @field_validator("parallel_tag_prefix", mode="before")
    @classmethod
    def _normalize_prefix(cls, value: Optional[str]) -> Optional[str]:
        # matched against tag names, so "@parallel" and "parallel" are equivalent
        prefix = str(value or "").strip()
        if prefix.startswith("@"):
            prefix = prefix[1:]
        return prefix or None

    @property
    def template_id(self) -> TemplateId:
        return "testng" if self.use_testng else "junit"

    @property
    def output_formats(self) -> list[str]:
        return _split_csv(self.format)

    @property
    def glue_packages(self) -> list[str]:
        return _split_csv(self.glue)


__all__ = ["GeneratorConfig"]
