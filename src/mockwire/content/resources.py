# src/mockwire/content/resources.py
"""File-backed test resources usable as expected or response content."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Resource[T](Protocol):
    """Anything that can produce a content value on demand."""

    def value(self) -> T: ...


class PlainTextResource:
    """UTF-8 text read from a file, loaded once on first use."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._value: str | None = None

    @property
    def path(self) -> Path:
        return self._path

    def value(self) -> str:
        """Return the file's text.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        if self._value is None:
            self._value = self._path.read_text(encoding="utf-8")
        return self._value

    def __repr__(self) -> str:
        return f"PlainTextResource({str(self._path)!r})"
