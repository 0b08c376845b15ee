"""Per-feature-file runner planning.

For one feature file the planner decides whether any runner is needed and,
when a parallel-tag prefix is configured, splits the file into one runner per
parallel tag plus a residual runner that excludes those tags. The planner is
pure with respect to its inputs: the base expression is never rewritten, each
runner filter is derived from it.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from cucumber_parallel.data_layer.feature_store import FeatureFile
from cucumber_parallel.tags.expression import (
    TagExpression,
    extract_feature_tags,
    filter_tags_by_prefix,
    matches_expression,
    with_excluded_tags,
    with_required_tag,
)
from cucumber_parallel.utils.errors import GeneratorError

logger = logging.getLogger(__name__)

ReadText = Callable[[FeatureFile], str]


class GenerationPlanner:
    def __init__(
        self,
        base_expression: TagExpression,
        *,
        read_text: ReadText,
        filter_by_tags: bool = False,
        parallel_tag_prefix: Optional[str] = None,
    ):
        self.base_expression = tuple(base_expression)
        self.read_text = read_text
        self.filter_by_tags = bool(filter_by_tags)
        self.parallel_tag_prefix = parallel_tag_prefix or None

    def _needs_text(self) -> bool:
        return self.filter_by_tags or self.parallel_tag_prefix is not None

    def _read(self, feature: FeatureFile) -> Optional[str]:
        try:
            return self.read_text(feature)
        except (GeneratorError, OSError):
            logger.info("Failed to read contents of %s. Parallel Test shall be created.", feature.path)
            return None

    def should_skip(self, text: Optional[str]) -> bool:
        """Skip only when filtering is on and readable text cannot match."""

        if not self.filter_by_tags or text is None:
            return False
        return not matches_expression(text, self.base_expression)

    def parallel_tags(self, text: Optional[str]) -> Tuple[str, ...]:
        if self.parallel_tag_prefix is None or text is None:
            return ()
        return filter_tags_by_prefix(extract_feature_tags(text), self.parallel_tag_prefix)

    def plan(self, feature: FeatureFile) -> List[TagExpression]:
        """Return the ordered tag filters, one per runner, for ``feature``.

        An empty list means the file is skipped. Otherwise the last entry is
        always the residual runner.
        """

        text = self._read(feature) if self._needs_text() else None
        if self.should_skip(text):
            logger.info("Skipping %s: no tags match %s", feature.location, self.base_expression)
            return []

        parallel = self.parallel_tags(text)
        filters = [with_required_tag(self.base_expression, tag) for tag in parallel]
        filters.append(with_excluded_tags(self.base_expression, parallel))
        return filters


__all__ = ["GenerationPlanner", "ReadText"]
