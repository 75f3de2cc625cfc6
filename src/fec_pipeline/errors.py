"""Exception types raised while reading and mapping filings.

Parsing distinguishes a line that could not be split at all (`MalformedLine`)
from a line that split fine but could not be labeled (`SchemaNotFound`,
`MissingTranslationTarget`), so callers can choose to skip one and abort on
the other.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class FilingError(Exception):
    """Base class for every error raised by fec_pipeline."""


class SchemaNotFound(FilingError, LookupError):
    """Raised when no row-type or version pattern matches a label."""

    def __init__(self, label: str, known_keys: Iterable[str]) -> None:
        self.label = label
        self.known_keys = tuple(known_keys)
        super().__init__(
            f"Attempted to access mapping that has not been generated ({label}). "
            f"Supported keys match the format: {', '.join(self.known_keys)}"
        )


class MalformedLine(FilingError, ValueError):
    """Raised when a line cannot be split with the filing's delimiter and quoting."""

    def __init__(self, line: str, reason: str = "") -> None:
        self.line = line
        message = f"Unable to parse line: {line[:80]!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingTranslationTarget(FilingError, KeyError):
    """Raised when a combine rule reads a field the row does not hold."""

    def __init__(self, field: str, row_type: str | None = None) -> None:
        self.field = field
        self.row_type = row_type
        super().__init__(field)

    def __str__(self) -> str:
        return f"Field {self.field!r} is not present on row {self.row_type!r}"


class UnregisteredTransform(FilingError, TypeError):
    """Raised when a convert or combine rule is registered without a callable."""


class FilingNotDownloaded(FilingError, FileNotFoundError):
    """Raised when a filing's rows are requested before its file exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"File {path} does not exist. Try calling download() on this Filing."
        )
