"""Mapping of raw row values into labeled, translated records.

Mapping runs in two passes. Every field first has its convert rules folded
over the raw value, in registration order. Only once the whole row is
converted do combine rules run, each seeing the converted row through a
read-only view, so a combine rule can depend on any field regardless of its
position or of when its convert rule was registered.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from typing import Any

from fec_pipeline.schema.mappings import Mappings, Schema
from fec_pipeline.translate.record import Record, RowView
from fec_pipeline.translate.translator import Action, Translator

log = logging.getLogger(__name__)


def field_positions(schema: Schema) -> dict[str, int]:
    """Return each named field's first position in ``schema``."""
    positions: dict[str, int] = {}
    for index, name in enumerate(schema):
        if name is not None and name not in positions:
            positions[name] = index
    return positions


class RecordMapper:
    """Turns raw rows of one filing into `Record` objects.

    Args:
        mappings: Schema lookups at the filing's version.
        translator: Rules and aliases applied to every row.
    """

    def __init__(self, mappings: Mappings, translator: Translator) -> None:
        self.mappings = mappings
        self.translator = translator

    @property
    def version(self) -> str:
        return self.mappings.version

    def map(
        self,
        raw_values: Sequence[str | None],
        row_type: str | None = None,
        include: Collection[str] | None = None,
    ) -> Record:
        """Label and translate one row.

        Args:
            raw_values: Values of the row as split from the file.
            row_type: Row-type value; defaults to the row's first value.
            include: Optional field names to keep. Schema order is kept.

        Returns:
            The mapped record, with combined fields added.

        Raises:
            SchemaNotFound: if the row type or version has no schema.
            MissingTranslationTarget: if a combine rule reads an absent field.
        """
        if row_type is None:
            row_type = raw_values[0] if raw_values else None
        row_type = row_type or ""

        schema = self.mappings.for_row(row_type)
        positions = field_positions(schema)
        if include is not None:
            wanted = set(include)
            fields = [name for name in positions if name in wanted]
        else:
            fields = list(positions)

        record = Record(row_type, self.translator)
        for name in fields:
            index = positions[name]
            value: Any = raw_values[index] if index < len(raw_values) else None
            for translation in self.translator.applicable(
                row=row_type, field=name, version=self.version, action=Action.CONVERT
            ):
                value = translation.transform(value)
            record[name] = value

        combinations = self.translator.applicable(
            row=row_type, version=self.version, action=Action.COMBINE
        )
        if combinations:
            view = RowView(record.copy())
            for translation in combinations:
                record[translation.target] = translation.transform(view)

        return record
