"""Comparison of two filings, typically an original and its amendment."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TYPE_CHECKING, Any

from fec_pipeline.schema.patterns import Label

if TYPE_CHECKING:
    from fec_pipeline.filing import Filing

_MISSING = object()


def hash_diff(first: Mapping[str, Any], second: Mapping[str, Any]) -> dict[str, Any]:
    """Return the entries that differ between two mapped rows.

    A key is reported when its value differs, or when it is present in only
    one of the rows. Values are taken from ``second``; keys that ``second``
    lacks report None.

    >>> hash_diff({"a": 1, "b": 2}, {"a": 1, "b": 3, "c": 4})
    {'b': 3, 'c': 4}
    """
    diff: dict[str, Any] = {}
    for key in first:
        if second.get(key, _MISSING) != first[key]:
            diff[key] = second.get(key)
    for key in second:
        if key not in first:
            diff[key] = second[key]
    return diff


def _row_key(record: Mapping[str, Any]) -> tuple[tuple[str, Hashable], ...]:
    return tuple(sorted((k, v if isinstance(v, Hashable) else repr(v)) for k, v in record.items()))


class Comparison:
    """Differences between two downloaded filings.

    Args:
        filing_1: The filing whose rows are reported.
        filing_2: The filing compared against.
    """

    def __init__(self, filing_1: Filing, filing_2: Filing) -> None:
        self.filing_1 = filing_1
        self.filing_2 = filing_2

    def summary(self) -> dict[str, Any]:
        """Return the summary fields that changed, with ``filing_2``'s values."""
        return hash_diff(self.filing_1.summary() or {}, self.filing_2.summary() or {})

    def schedule(self, row_type: Label) -> list[Any]:
        """Return the ``row_type`` rows of ``filing_1`` that ``filing_2`` does not contain.

        Rows are compared on their full mapped contents, so a changed row is
        reported as well as a new one.
        """
        seen = {_row_key(row) for row in self.filing_2.iter_rows_like(row_type)}
        return [row for row in self.filing_1.iter_rows_like(row_type) if _row_key(row) not in seen]
