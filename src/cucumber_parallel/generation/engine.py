"""Runner generation over a batch of feature files.

Files are processed strictly in order. ``file_counter`` starts at 1 and is
bumped once per runner, so every runner in a batch owns a distinct number
used both in its class name and in its report file names.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from cucumber_parallel.config.settings import GeneratorConfig
from cucumber_parallel.data_layer.feature_store import FeatureFile, FeatureStore, RunnerWriter
from cucumber_parallel.generation.planner import GenerationPlanner
from cucumber_parallel.generation.render import RunnerContext, TemplateRenderer, report_specs
from cucumber_parallel.tags.expression import TagExpression, split_into_anded_or_groups
from cucumber_parallel.types import resolve_naming_scheme
from cucumber_parallel.utils.class_names import generate_class_name, strip_extension

logger = logging.getLogger(__name__)


class RendererProto(Protocol):
    def render(self, context: RunnerContext) -> str:  # pragma: no cover - protocol only
        ...


@dataclass(frozen=True)
class RunnerSpec:
    sequence: int
    tag_filter: TagExpression
    output_file_name: str
    feature: FeatureFile

    @property
    def class_name(self) -> str:
        return strip_extension(self.output_file_name)


class RunnerGenerator:
    def __init__(
        self,
        config: GeneratorConfig,
        *,
        store: Optional[FeatureStore] = None,
        writer: Optional[RunnerWriter] = None,
        renderer: Optional[RendererProto] = None,
    ):
        # Fail before anything is written.
        self.naming_scheme = resolve_naming_scheme(config.naming_scheme)
        self.config = config
        self.store = store or FeatureStore(config.features_directory, encoding=config.encoding)
        self.writer = writer or RunnerWriter(config.output_directory, encoding=config.encoding)
        self.renderer = renderer or TemplateRenderer(
            config.template_id,
            templates_root=config.templates_root,
            encoding=config.encoding,
        )
        self.base_expression = split_into_anded_or_groups(config.tags)
        self.planner = GenerationPlanner(
            self.base_expression,
            read_text=self.store.read_text,
            filter_by_tags=config.filter_features_by_tags,
            parallel_tag_prefix=config.parallel_tag_prefix,
        )
        self.file_counter = 1

    def build_context(self, spec: RunnerSpec) -> RunnerContext:
        return RunnerContext(
            strict=self.config.strict,
            feature_file=spec.feature.location,
            reports=report_specs(self.config.output_formats, self.config.cucumber_output_dir, spec.sequence),
            tags=spec.tag_filter,
            monochrome=self.config.monochrome,
            cucumber_output_dir=self.config.cucumber_output_dir,
            glue=tuple(self.config.glue_packages),
            file_counter=f"{spec.sequence:02d}",
            class_name=spec.class_name,
        )

    def _emit(self, feature: FeatureFile, tag_filter: TagExpression) -> tuple[RunnerSpec, Path]:
        spec = RunnerSpec(
            sequence=self.file_counter,
            tag_filter=tag_filter,
            output_file_name=generate_class_name(self.naming_scheme, feature.name, self.file_counter),
            feature=feature,
        )
        try:
            text = self.renderer.render(self.build_context(spec))
            path = self.writer.write(spec.output_file_name, text)
        finally:
            # The counter names report files too, so it advances even on failure.
            self.file_counter += 1
        return spec, path

    def generate_for_feature(self, feature: FeatureFile) -> List[RunnerSpec]:
        specs: List[RunnerSpec] = []
        for tag_filter in self.planner.plan(feature):
            spec, path = self._emit(feature, tag_filter)
            logger.info("Generated %s for %s", path, feature.location)
            specs.append(spec)
        return specs

    def generate(self, feature_files: Optional[Iterable[FeatureFile]] = None) -> List[RunnerSpec]:
        """Generate runners for ``feature_files`` (discovered when omitted).

        A write failure raises immediately; runners already written stay on disk.
        """

        files = list(feature_files) if feature_files is not None else self.store.list_feature_files()
        specs: List[RunnerSpec] = []
        for feature in files:
            specs.extend(self.generate_for_feature(feature))
        logger.info(
            "Generated %d runner(s) from %d feature file(s) into %s",
            len(specs),
            len(files),
            self.writer.output_directory,
        )
        return specs


def generate_runners(config: GeneratorConfig) -> List[RunnerSpec]:
    return RunnerGenerator(config).generate()


__all__ = ["RunnerSpec", "RunnerGenerator", "generate_runners"]
