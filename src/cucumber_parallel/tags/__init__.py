"""Tag-expression parsing for feature-file selection."""

from .expression import (
    TagExpression,
    extract_feature_tags,
    filter_tags_by_prefix,
    format_expression,
    format_tag_list,
    matches_expression,
    split_into_anded_or_groups,
    with_excluded_tags,
    with_required_tag,
)

__all__ = [
    "TagExpression",
    "extract_feature_tags",
    "filter_tags_by_prefix",
    "format_expression",
    "format_tag_list",
    "matches_expression",
    "split_into_anded_or_groups",
    "with_excluded_tags",
    "with_required_tag",
]
