from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cucumber_parallel.cli import main
from cucumber_parallel.utils.errors import GeneratorError


def _features(tmp_path: Path) -> Path:
    root = tmp_path / "features"
    root.mkdir()
    (root / "checkout.feature").write_text("@regression @parallel1\nFeature: x\n", encoding="utf-8")
    (root / "admin.feature").write_text("@admin\nFeature: y\n", encoding="utf-8")
    return root


def test_cli_flags_drive_generation(tmp_path: Path, capsys) -> None:
    features = _features(tmp_path)
    out = tmp_path / "out"

    code = main(
        [
            "--features-dir",
            str(features),
            "--output-dir",
            str(out),
            "--tags",
            '"@regression"',
            "--filter-by-tags",
            "--parallel-tag-prefix",
            "parallel",
            "--naming-scheme",
            "feature-title",
        ]
    )

    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == ["Checkout01IT.java", "Checkout02IT.java"]
    printed = capsys.readouterr().out.splitlines()
    assert printed == [str(out / "Checkout01IT.java"), str(out / "Checkout02IT.java")]


def test_cli_config_file_with_cucumber_options(tmp_path: Path) -> None:
    _features(tmp_path)
    config = tmp_path / "runners.yaml"
    config.write_text(
        "features_directory: features\noutput_directory: out\nfilter_features_by_tags: true\n",
        encoding="utf-8",
    )

    main(["--config", str(config), "--cucumber-options=--tags @admin --monochrome"])

    runner = (tmp_path / "out" / "Parallel01IT.java").read_text(encoding="utf-8")
    assert 'features = {"features/admin.feature"},' in runner
    assert 'tags = {"@admin"},' in runner
    assert "monochrome = true," in runner
    assert not (tmp_path / "out" / "Parallel02IT.java").exists()


def test_cli_rejects_bad_naming_scheme(tmp_path: Path) -> None:
    features = _features(tmp_path)

    with pytest.raises(GeneratorError):
        main(["--features-dir", str(features), "--output-dir", str(tmp_path / "out"), "--naming-scheme", "camel"])
    assert not (tmp_path / "out").exists()


@pytest.fixture(autouse=True)
def package_logger():
    logger = logging.getLogger("cucumber_parallel")
    saved = logger.level
    yield logger
    logger.setLevel(saved)


def test_cli_verbose_enables_debug_logging(tmp_path: Path, caplog, package_logger) -> None:
    features = _features(tmp_path)
    argv = ["--features-dir", str(features), "--output-dir", str(tmp_path / "out"), "--cucumber-options=--dry-run"]

    main(argv)
    assert package_logger.level == logging.INFO
    assert "Ignoring cucumber option --dry-run" not in caplog.text

    main(["--verbose", *argv])
    assert package_logger.level == logging.DEBUG
    assert "Ignoring cucumber option --dry-run" in caplog.text
