"""Error surface shared by config loading, planning and runner output.

``INVALID_CONFIG`` aborts before generation starts, ``IO_ERROR`` on a feature
read is recovered by the planner while ``IO_ERROR`` on a runner write aborts
the batch. ``ctx["op"]`` tells reads and writes apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Err(Enum):
    DATA_MISSING = "missing input"
    INVALID_CONFIG = "invalid configuration"
    MISSING_TEMPLATE = "runner template not found"
    IO_ERROR = "i/o failure"


@dataclass(eq=False)
class GeneratorError(Exception):
    code: Err
    ctx: dict[str, Any] | None = None
    cause: Exception | None = None

    def __post_init__(self) -> None:
        if self.ctx is None:
            self.ctx = {}
        if self.cause is not None:
            self.__cause__ = self.cause
        super().__init__(self.code.name)

    @property
    def path(self) -> str | None:
        value = self.ctx.get("path")
        return str(value) if value is not None else None

    def headline(self) -> str:
        op = self.ctx.get("op")
        if self.code is Err.IO_ERROR and op in {"read", "write"} and self.path:
            return f"cannot {op} {self.path}"
        if self.code is Err.MISSING_TEMPLATE and self.path:
            return f"{self.code.value}: {self.path}"
        return self.code.value

    def __str__(self) -> str:
        shown = {"op", "path"} if self._path_in_headline() else set()
        details = {k: v for k, v in self.ctx.items() if k not in shown}
        parts = [f"{self.code.name} ({self.headline()})"]
        if details:
            parts.append(", ".join(f"{k}={v!r}" for k, v in details.items()))
        if self.cause is not None:
            parts.append(str(self.cause))
        return ": ".join(parts)

    def _path_in_headline(self) -> bool:
        return self.path is not None and self.path in self.headline()
