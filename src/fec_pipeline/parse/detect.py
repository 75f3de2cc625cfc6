"""Detection of a filing's software version and delimiter from its header line.

Files produced by version 6 software and later separate values with the
ASCII field separator (0x1C); older files are comma separated. The version
itself lives in the third value of the header line, so the header has to be
split before the delimiter is officially known: the presence of the field
separator in the raw text decides which split to use.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from fec_pipeline.parse.delimited import safe_split

FS = "\x1c"
COMMA = ","

_NUMBER_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)")


@dataclass(frozen=True)
class FilingFormat:
    """Version and delimiter declared by a filing's header.

    Attributes:
        version: Version string exactly as written in the header (e.g. ``"5.00"``).
        delimiter: Field delimiter used by every line of the file.
    """
    version: str
    delimiter: str


def version_number(version: str) -> float:
    """Return the leading numeric part of a version string, or 0.0 if none."""
    m = _NUMBER_RE.match(version)
    return float(m.group(1)) if m else 0.0


def delimiter_for(version: str) -> str:
    """Return the delimiter used by files of the given version."""
    return COMMA if version_number(version) < 6 else FS


def detect(first_line: str, quote_char: str = '"') -> FilingFormat:
    """Determine version and delimiter from the first line of a filing.

    Args:
        first_line: The header line, as read from the file.
        quote_char: Quote character used when splitting the header.

    Returns:
        FilingFormat with the header's version and the matching delimiter.
        A header too short to carry a version yields an empty version string.
    """
    separator = FS if FS in first_line else COMMA
    values = safe_split(first_line, separator, quote_char)
    version = (values[2] if len(values) > 2 else None) or ""
    version = version.strip()
    return FilingFormat(version=version, delimiter=delimiter_for(version))


def detect_file(path: Path, encoding: str = "utf-8", quote_char: str = '"') -> FilingFormat:
    """Read only the first line of ``path`` and detect its format."""
    with path.open("r", encoding=encoding, errors="replace") as fh:
        first = fh.readline()
    return detect(first, quote_char)
