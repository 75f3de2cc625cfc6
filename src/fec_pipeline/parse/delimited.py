"""Splitting of delimited filing lines, with recovery for bad quoting.

Filing software regularly emits lines with unbalanced or stray quote
characters. Those lines fail a strict CSV parse even though each individual
value is usually fine once the delimiter ambiguity is removed, so
`safe_split` retries such a line exactly once with quoting disabled and then
cleans each value on its own.
"""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Iterable, Iterator

from fec_pipeline.errors import MalformedLine
from fec_pipeline.schema.patterns import Label, canonicalize

log = logging.getLogger(__name__)

Row = list[str | None]


def _reader(line: str, separator: str, quote_char: str | None) -> Iterator[list[str]]:
    """Return a strict csv reader over a single physical line."""
    if quote_char is None:
        return csv.reader([line], delimiter=separator, quoting=csv.QUOTE_NONE, strict=True)
    return csv.reader([line], delimiter=separator, quotechar=quote_char, strict=True)


def _parse(line: str, separator: str, quote_char: str | None) -> list[str]:
    """Parse one line into raw strings, raising MalformedLine on any csv error."""
    try:
        return next(_reader(line, separator, quote_char), [])
    except csv.Error as exc:
        raise MalformedLine(line, str(exc)) from exc


def split(line: str, separator: str = ",", quote_char: str = '"') -> Row:
    """Split one line using strict CSV rules.

    Args:
        line: A physical line; a trailing line terminator is ignored.
        separator: Field delimiter.
        quote_char: Quote character.

    Returns:
        The field values; empty fields are returned as ``None``.

    Raises:
        MalformedLine: if the line's quoting is invalid.
    """
    line = line.rstrip("\r\n")
    return [value if value != "" else None for value in _parse(line, separator, quote_char)]


def _safe_value(value: str, separator: str, quote_char: str) -> str | None:
    """Strip extraneous quoting from a single value recovered from a bad line."""
    try:
        parsed = _parse(value, separator, quote_char)
    except MalformedLine:
        return value
    if not parsed:
        return None
    return parsed[0] if parsed[0] != "" else None


def safe_split(line: str, separator: str = ",", quote_char: str = '"') -> Row:
    """Split a line, recovering once from malformed quoting.

    The recovery pass splits the line with quoting disabled, then re-parses
    every value as a one-field line with the original quote character. A value
    that parses keeps its first field; one that doesn't is kept verbatim.
    Lines that already parse cleanly never reach the recovery pass.

    Raises:
        MalformedLine: if the line cannot be split even with quoting disabled.
    """
    try:
        return split(line, separator, quote_char)
    except MalformedLine as exc:
        log.warning("Recovering malformed line: %s", exc)

    stripped = line.rstrip("\r\n")
    values = _parse(stripped, separator, None)
    return [
        _safe_value(value, separator, quote_char) if value != "" else None
        for value in values
    ]


def iter_rows(
    lines: Iterable[str],
    separator: str = ",",
    quote_char: str = '"',
    recover: bool = True,
    row_type: Label | None = None,
) -> Iterator[Row]:
    """Lazily split lines into rows, skipping blank lines.

    Args:
        lines: Forward-only source of physical lines.
        separator: Field delimiter.
        quote_char: Quote character.
        recover: Use `safe_split` instead of strict `split`.
        row_type: Optional row-type selector; lines whose raw text does not
            match it are skipped before being split.

    Yields:
        Raw field values for each non-blank line.
    """
    splitter = safe_split if recover else split
    matcher: re.Pattern[str] | None = canonicalize(row_type) if row_type is not None else None

    for line in lines:
        if not line.strip():
            continue
        if matcher is not None and not matcher.search(line.lstrip(quote_char)):
            continue
        yield splitter(line, separator, quote_char)
