from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from cucumber_parallel.utils.errors import Err, GeneratorError

FEATURE_SUFFIX = ".feature"


@dataclass(frozen=True)
class FeatureFile:
    """A discovered feature file.

    ``location`` is the path handed to cucumber: the features root's own
    directory name followed by the path below it, always ``/``-separated.
    """

    path: Path
    location: str

    @property
    def name(self) -> str:
        return self.path.name


class FeatureStore:
    """Read-side facade over the features directory."""

    def __init__(self, features_directory: Path | str, *, encoding: str = "utf-8"):
        if features_directory is None or str(features_directory).strip() == "":
            raise GeneratorError(Err.INVALID_CONFIG, ctx={"field": "features_directory", "reason": "missing"})
        self.root = Path(features_directory)
        self.encoding = encoding

    def location(self, path: Path | str) -> str:
        target = Path(path)
        try:
            relative = target.relative_to(self.root)
        except ValueError:
            return target.as_posix()
        return "/".join((self.root.name, *relative.parts)) if self.root.name else relative.as_posix()

    def feature_file(self, path: Path | str) -> FeatureFile:
        return FeatureFile(path=Path(path), location=self.location(path))

    def list_feature_files(self) -> List[FeatureFile]:
        """Recursively list ``*.feature`` files ordered by their path below the root."""

        if not self.root.is_dir():
            raise GeneratorError(Err.DATA_MISSING, ctx={"features_directory": str(self.root)})
        paths = [p for p in self.root.rglob(f"*{FEATURE_SUFFIX}") if p.is_file()]
        paths.sort(key=lambda p: p.relative_to(self.root).as_posix())
        return [self.feature_file(p) for p in paths]

    def read_text(self, feature: FeatureFile) -> str:
        try:
            return feature.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise GeneratorError(Err.IO_ERROR, ctx={"op": "read", "path": str(feature.path)}, cause=exc)


class RunnerWriter:
    """Write-side facade over the runner output directory."""

    def __init__(self, output_directory: Path | str, *, encoding: str = "utf-8"):
        if output_directory is None or str(output_directory).strip() == "":
            raise GeneratorError(Err.INVALID_CONFIG, ctx={"field": "output_directory", "reason": "missing"})
        self.output_directory = Path(output_directory)
        self.encoding = encoding

    def write(self, file_name: str, text: str) -> Path:
        target = self.output_directory / file_name
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(str(text or ""), encoding=self.encoding)
        except OSError as exc:
            raise GeneratorError(Err.IO_ERROR, ctx={"op": "write", "path": str(target)}, cause=exc)
        return target


__all__ = ["FEATURE_SUFFIX", "FeatureFile", "FeatureStore", "RunnerWriter"]
