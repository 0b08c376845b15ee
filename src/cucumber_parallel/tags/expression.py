"""Tag-expression parsing and file-level matching.

Expressions use the quoted cucumber-jvm form ``"@a,@b","@c"``: every quoted
run is one OR-group and the groups are AND-ed together. Matching here is a
conservative pre-filter over a whole feature file (literal substring checks),
not a scenario-level evaluation; the test runner applies the real filter.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence, Tuple

OrGroup = Tuple[str, ...]
TagExpression = Tuple[OrGroup, ...]

NEGATION = "~"

_TAG_GROUP = re.compile(r'"([^"]*?)"')
_FEATURE_TAG = re.compile(r"@\w+")


def split_into_anded_or_groups(text: str | None) -> TagExpression:
    """Split a quoted tag expression into AND-ed OR-groups.

    >>> split_into_anded_or_groups('"@a,@b","@c"')
    (('@a', '@b'), ('@c',))
    """

    groups: list[OrGroup] = []
    for match in _TAG_GROUP.finditer(text or ""):
        tokens = tuple(tok.strip() for tok in match.group(1).split(",") if tok.strip())
        if tokens:
            groups.append(tokens)
    return tuple(groups)


def extract_feature_tags(text: str) -> Tuple[str, ...]:
    """Return every ``@tag`` token in ``text`` in order of appearance (duplicates kept)."""

    return tuple(_FEATURE_TAG.findall(text or ""))


def _group_satisfied(text: str, group: OrGroup) -> bool:
    for tag in group:
        # A file holding an excluded tag may still hold scenarios that match,
        # so any negated member satisfies the whole group.
        if tag.startswith(NEGATION):
            return True
        if tag in text:
            return True
    return False


def matches_expression(text: str, expression: TagExpression) -> bool:
    """True when every OR-group of ``expression`` is satisfied by ``text``."""

    return all(_group_satisfied(text, group) for group in expression)


def filter_tags_by_prefix(tags: Iterable[str], prefix: str) -> Tuple[str, ...]:
    """Keep tags whose name (leading ``@`` stripped) starts with ``prefix``.

    The result is ordered by first appearance and holds each tag once.
    """

    seen: dict[str, None] = {}
    for tag in tags:
        name = tag[1:] if tag.startswith("@") else tag
        if name.startswith(prefix) and tag not in seen:
            seen[tag] = None
    return tuple(seen)


def with_required_tag(expression: TagExpression, tag: str) -> TagExpression:
    return ((tag,),) + tuple(expression)


def with_excluded_tags(expression: TagExpression, tags: Sequence[str]) -> TagExpression:
    return tuple(expression) + tuple((NEGATION + tag,) for tag in tags)


def format_tag_list(tags: Sequence[str]) -> str:
    """Quote each tag as its own group: ``["@a", "@b"]`` -> ``"@a","@b"``."""

    if not tags:
        return ""
    return '"' + '","'.join(tags) + '"'


def format_expression(expression: TagExpression) -> str:
    return ", ".join('"' + ",".join(group) + '"' for group in expression)


__all__ = [
    "OrGroup",
    "TagExpression",
    "split_into_anded_or_groups",
    "extract_feature_tags",
    "matches_expression",
    "filter_tags_by_prefix",
    "with_required_tag",
    "with_excluded_tags",
    "format_tag_list",
    "format_expression",
]
