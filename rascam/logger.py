"""A small append-only text log with a process-wide shared instance."""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar


class Logger:
    """Append lines of text to a log file."""

    _shared: ClassVar["Logger | None"] = None

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path: Path | None = Path(path) if path is not None else None

    @classmethod
    def instance(cls) -> "Logger":
        """Return the logger shared by the whole process, creating it on first use."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def set_path(self, path: str | os.PathLike[str]) -> None:
        """Direct all further output to ``path``."""
        self.path = Path(path)

    def _require_path(self) -> Path:
        if self.path is None:
            raise ValueError("log path has not been set")
        return self.path

    def clear(self) -> None:
        """Truncate the log file, creating it if it does not exist."""
        with self._require_path().open("w", encoding="utf-8"):
            pass

    def write(self, message: str) -> None:
        """Append ``message`` as one line."""
        with self._require_path().open("a", encoding="utf-8") as log:
            log.write(f"{message}\n")