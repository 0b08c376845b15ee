"""Command-line entry point for generating cucumber runner classes."""

from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Iterable

from cucumber_parallel.config import GeneratorConfig, apply_cucumber_options, load_config
from cucumber_parallel.config.loader import parse_config_mapping
from cucumber_parallel.generation import RunnerGenerator
from cucumber_parallel.types import NAMING_SCHEMES
from cucumber_parallel.utils.errors import GeneratorError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate parallel cucumber runner classes")
    parser.add_argument("--config", help="YAML or JSON config file")
    parser.add_argument("--features-dir", dest="features_directory", help="Root directory of .feature files")
    parser.add_argument("--output-dir", dest="output_directory", help="Directory for generated runners")
    parser.add_argument("--cucumber-output-dir", dest="cucumber_output_dir", help="Report directory used by runners")
    parser.add_argument("--encoding", help="Source encoding (default UTF-8)")
    parser.add_argument("--tags", help='Tag expression, e.g. \'"@a,@b","@c"\'')
    parser.add_argument("--parallel-tag-prefix", dest="parallel_tag_prefix", help="Prefix of parallel tags")
    parser.add_argument(
        "--naming-scheme",
        dest="naming_scheme",
        help=f"Runner naming scheme ({' | '.join(NAMING_SCHEMES)})",
    )
    parser.add_argument("--format", help="Comma-separated cucumber formatters")
    parser.add_argument("--glue", help="Comma-separated glue packages")
    parser.add_argument("--strict", dest="strict", action="store_true", default=None)
    parser.add_argument("--no-strict", dest="strict", action="store_false")
    parser.add_argument("--monochrome", dest="monochrome", action="store_true", default=None)
    parser.add_argument("--testng", dest="use_testng", action="store_true", default=None)
    parser.add_argument(
        "--filter-by-tags",
        dest="filter_features_by_tags",
        action="store_true",
        default=None,
        help="Skip feature files that cannot match --tags",
    )
    parser.add_argument("--cucumber-options", dest="cucumber_options", help="cucumber.options style overrides")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


_CONFIG_FIELDS = (
    "features_directory",
    "output_directory",
    "cucumber_output_dir",
    "encoding",
    "tags",
    "parallel_tag_prefix",
    "naming_scheme",
    "format",
    "glue",
    "strict",
    "monochrome",
    "use_testng",
    "filter_features_by_tags",
)


def _resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    base = load_config(args.config) if args.config else GeneratorConfig()
    overrides: Dict[str, Any] = {
        field: getattr(args, field) for field in _CONFIG_FIELDS if getattr(args, field) is not None
    }
    config = parse_config_mapping({**base.model_dump(), **overrides}) if overrides else base
    return apply_cucumber_options(config, args.cucumber_options)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("cucumber_parallel").setLevel(level)


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    _configure_logging(args.verbose)

    config = _resolve_config(args)
    specs = RunnerGenerator(config).generate()
    for spec in specs:
        print(config.output_directory / spec.output_file_name)
    return 0


def entrypoint() -> None:  # pragma: no cover - console entry
    try:
        raise SystemExit(main())
    except GeneratorError as exc:  # pragma: no cover - console behavior
        raise SystemExit(f"error: {exc}")
