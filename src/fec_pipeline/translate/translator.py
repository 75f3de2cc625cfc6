"""Registry of convert rules, combine rules and aliases for one filing.

A rule carries three selectors (row type, field, version). Selectors left out
at registration match everything; selectors left out at lookup are not
checked. Rules are kept in registration order because convert rules on the
same field chain into one another.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fec_pipeline.errors import UnregisteredTransform
from fec_pipeline.schema.patterns import MATCH_ALL, Label, canonicalize, label_text

log = logging.getLogger(__name__)


class Action(str, Enum):
    CONVERT = "convert"
    COMBINE = "combine"


@dataclass(frozen=True)
class Translation:
    """A registered rule.

    Attributes:
        row: Pattern matched against the row-type value.
        field: Pattern matched against the field name. For combine rules it
            also names the produced field.
        version: Pattern matched against the filing version.
        action: Whether the rule converts one value or combines a whole row.
        transform: The callable run by the mapper.
    """
    row: re.Pattern[str]
    field: re.Pattern[str]
    version: re.Pattern[str]
    action: Action
    transform: Callable[..., Any]

    def matches(self, **context: Any) -> bool:
        """Return True if every supplied selector matches this rule.

        Context keys are ``row``, ``field``, ``version`` and ``action``; keys
        whose value is None are ignored.
        """
        for key, value in context.items():
            if value is None:
                continue
            if key == "action":
                if Action(value) is not self.action:
                    return False
                continue
            pattern: re.Pattern[str] = getattr(self, key)
            if not pattern.search(label_text(value)):
                return False
        return True

    @property
    def target(self) -> str:
        """Field name produced by a combine rule (its field pattern without anchors)."""
        return re.sub(r"[\^\$]", "", self.field.pattern)


@dataclass(frozen=True)
class Alias:
    """Alternate name ``name`` for the field ``target`` on rows matching ``row``."""
    row: re.Pattern[str]
    name: str
    target: str


class Translator:
    """Holds the translations and aliases applied to one filing's rows.

    Row and version selectors given as strings are matched as free text
    (``"sa"`` matches ``"SA11AI"``); field selectors given as strings must name
    the whole field. Compiled patterns and `RowType` members are used as is.

    Args:
        include: Names of bundled rule packs to register on construction
            (see `fec_pipeline.translate.defaults`).
    """

    def __init__(self, include: Iterable[str] | str = ()) -> None:
        self.translations: list[Translation] = []
        self.aliases: list[Alias] = []
        self._cache: dict[tuple[str | None, ...], tuple[Translation, ...]] = {}
        if include:
            # Imported here: the packs register rules through this class.
            from fec_pipeline.translate.defaults import add_default_translations

            add_default_translations(self, include)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def convert(
        self,
        transform: Callable[[Any], Any] | None = None,
        *,
        row: Label | None = None,
        field: Label | None = None,
        version: Label | None = None,
    ) -> Translation:
        """Register a rule that rewrites a single value.

        The transform receives the field's current value and returns the new one.
        """
        return self._add(Action.CONVERT, transform, row, field, version)

    def combine(
        self,
        transform: Callable[[Any], Any] | None = None,
        *,
        row: Label | None = None,
        field: Label | None = None,
        version: Label | None = None,
    ) -> Translation:
        """Register a rule that derives a new field from the whole row.

        The transform receives a read-only mapping of the converted row and its
        result is stored under ``field``.
        """
        return self._add(Action.COMBINE, transform, row, field, version)

    def alias(self, new_name: str, old_name: str, row: Label | None = None) -> Alias:
        """Make ``old_name`` readable as ``new_name`` on rows matching ``row``."""
        entry = Alias(
            row=MATCH_ALL if row is None else canonicalize(row),
            name=new_name,
            target=old_name,
        )
        self.aliases.append(entry)
        return entry

    def _add(
        self,
        action: Action,
        transform: Callable[..., Any] | None,
        row: Label | None,
        field: Label | None,
        version: Label | None,
    ) -> Translation:
        if transform is None or not callable(transform):
            raise UnregisteredTransform(f"A callable is required to register a {action.value} rule")

        translation = Translation(
            row=MATCH_ALL if row is None else canonicalize(row),
            field=MATCH_ALL if field is None else canonicalize(field, exact=True),
            version=MATCH_ALL if version is None else canonicalize(version),
            action=action,
            transform=transform,
        )
        self.translations.append(translation)
        self._cache.clear()
        return translation

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def applicable(
        self,
        *,
        row: Label | None = None,
        field: Label | None = None,
        version: Label | None = None,
        action: Action | str | None = None,
    ) -> tuple[Translation, ...]:
        """Return the rules matching the given context, in registration order."""
        key = tuple(
            None if value is None else label_text(value)
            for value in (field, row, version, action.value if isinstance(action, Action) else action)
        )
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        found = tuple(
            t for t in self.translations
            if t.matches(row=row, field=field, version=version, action=action)
        )
        self._cache[key] = found
        return found

    def resolve_alias(self, name: str, row_type: str) -> str | None:
        """Return the field ``name`` stands for on ``row_type``, or None.

        Only the most recently registered matching alias is used, and its
        target is returned as is (aliases do not chain).
        """
        for entry in reversed(self.aliases):
            if entry.name == name and entry.name != entry.target and entry.row.search(row_type):
                return entry.target
        return None

    def __repr__(self) -> str:
        return (
            f"Translator(translations={len(self.translations)}, "
            f"aliases={len(self.aliases)})"
        )
