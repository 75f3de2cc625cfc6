"""Mapped rows with alias-aware reads."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from fec_pipeline.errors import MissingTranslationTarget
from fec_pipeline.translate.translator import Translator


class Record(dict):
    """A mapped row: field name → value, tagged with its row type.

    Reading a key the record does not hold falls back to the translator's
    aliases (one hop). Keys that are neither stored nor aliased raise
    KeyError; `get` returns the default for them.
    """

    def __init__(
        self,
        row_type: str | None,
        translator: Translator | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.row_type = row_type
        self.translator = translator

    def __missing__(self, key: str) -> Any:
        target = self._alias_target(key)
        if target is None or not dict.__contains__(self, target):
            raise KeyError(key)
        return dict.__getitem__(self, target)

    def _alias_target(self, key: str) -> str | None:
        if self.translator is None or self.row_type is None:
            return None
        return self.translator.resolve_alias(key, self.row_type)

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def resolves(self, key: str) -> bool:
        """Return True if ``key`` is stored directly or reachable through an alias."""
        if dict.__contains__(self, key):
            return True
        target = self._alias_target(key)
        return target is not None and dict.__contains__(self, target)

    def copy(self) -> Record:
        return Record(self.row_type, self.translator, self)

    def __repr__(self) -> str:
        return f"Record({self.row_type!r}, {dict.__repr__(self)})"


class RowView(Mapping[str, Any]):
    """Read-only view of a record handed to combine rules.

    Missing fields raise `MissingTranslationTarget`, a KeyError, so
    ``view.get(name)`` still returns None for optional fields.
    """

    def __init__(self, record: Record) -> None:
        self._record = record

    @property
    def row_type(self) -> str | None:
        return self._record.row_type

    def __getitem__(self, key: str) -> Any:
        try:
            return self._record[key]
        except KeyError:
            raise MissingTranslationTarget(key, self._record.row_type) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._record)

    def __len__(self) -> int:
        return len(self._record)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._record.resolves(key)
