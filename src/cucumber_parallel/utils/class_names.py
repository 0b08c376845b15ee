"""Runner class/file names derived from feature files and the run counter."""

from __future__ import annotations

import re
from pathlib import PurePath

from ..types import NamingScheme, resolve_naming_scheme

JAVA_EXTENSION = ".java"

_STARTS_WITH_DIGIT = re.compile(r"^\d")


def _lower_hyphen_to_upper_camel(value: str) -> str:
    return "".join(part[:1].upper() + part[1:].lower() for part in value.split("-"))


def simple_class_name(file_counter: int) -> str:
    return f"Parallel{file_counter:02d}IT{JAVA_EXTENSION}"


def class_name_from_feature_file(feature_file_name: str, file_counter: int) -> str:
    """Build ``<UpperCamelTitle><NN>IT.java`` from a feature file name.

    Underscores act as word separators and spaces are dropped, so
    ``my_feature one.feature`` becomes ``MyFeatureone03IT.java`` for counter 3.
    Names that would start with a digit get a single leading underscore.
    """

    stem = PurePath(feature_file_name).stem
    stem = stem.replace("_", "-").replace(" ", "")
    class_name = _lower_hyphen_to_upper_camel(stem)
    if _STARTS_WITH_DIGIT.match(class_name):
        class_name = "_" + class_name
    return f"{class_name}{file_counter:02d}IT{JAVA_EXTENSION}"


def generate_class_name(scheme: NamingScheme | str, feature_file_name: str, file_counter: int) -> str:
    resolved = resolve_naming_scheme(scheme)
    if resolved == "simple":
        return simple_class_name(file_counter)
    return class_name_from_feature_file(feature_file_name, file_counter)


def strip_extension(file_name: str) -> str:
    return str(PurePath(file_name).with_suffix(""))


__all__ = [
    "JAVA_EXTENSION",
    "simple_class_name",
    "class_name_from_feature_file",
    "generate_class_name",
    "strip_extension",
]
