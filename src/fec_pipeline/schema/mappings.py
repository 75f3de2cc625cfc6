"""Resolution of (row type, version) to an ordered field list.

The schema table is keyed twice by pattern strings: first by row-type
pattern, then by version pattern. A label is resolved against a level by
collecting every key whose pattern matches the label and taking the longest
key; the longer key is the more specific one (``^sc1`` over ``^sc``), and
equally long keys keep table order.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType

from fec_pipeline import DEFAULT_VERSION
from fec_pipeline.errors import SchemaNotFound
from fec_pipeline.schema.patterns import Label, RowType, label_text
from fec_pipeline.schema.rendered_maps import RENDERED_MAPS

log = logging.getLogger(__name__)

Schema = tuple[str | None, ...]


def build_schema_table(
    rendered: Mapping[str, Mapping[str, list[str | None]]],
) -> Mapping[str, Mapping[str, Schema]]:
    """Freeze a rendered map into a read-only two-level table.

    Args:
        rendered: Row pattern → version pattern → field list.

    Returns:
        Nested read-only mappings whose leaves are tuples.
    """
    return MappingProxyType(
        {
            row_key: MappingProxyType(
                {version_key: tuple(fields) for version_key, fields in versions.items()}
            )
            for row_key, versions in rendered.items()
        }
    )


SCHEMA_TABLE = build_schema_table(RENDERED_MAPS)


def key_by_pattern(table: Mapping[str, object], label: Label) -> str:
    """Return the key of ``table`` whose pattern best matches ``label``.

    Args:
        table: Mapping keyed by pattern strings.
        label: Row-type or version label to match.

    Returns:
        The longest matching key; ties keep table order.
        A RowType member whose pattern is itself a key returns that key.

    Raises:
        SchemaNotFound: if no key matches.
    """
    if isinstance(label, RowType) and label.value in table:
        return label.value
    text = label_text(label)
    matches = [key for key in table if re.search(key, text, re.IGNORECASE)]
    if not matches:
        raise SchemaNotFound(text, table.keys())
    return sorted(matches, key=len, reverse=True)[0]


def resolve(
    row_type: Label,
    version: str = DEFAULT_VERSION,
    table: Mapping[str, Mapping[str, Schema]] = SCHEMA_TABLE,
) -> Schema:
    """Return the ordered field names for a row type at a version.

    Args:
        row_type: Row-type value (``"SA11AI"``), keyword or RowType member.
        version: Filing version string.
        table: Schema table to search; defaults to the embedded one.

    Raises:
        SchemaNotFound: if either the row type or the version has no entry.
    """
    versions = table[key_by_pattern(table, row_type)]
    return versions[key_by_pattern(versions, version)]


class Mappings:
    """Schema lookups for a single filing version, cached per row type."""

    def __init__(
        self,
        version: str = DEFAULT_VERSION,
        table: Mapping[str, Mapping[str, Schema]] = SCHEMA_TABLE,
    ) -> None:
        self.version = version
        self.table = table
        self._cache: dict[tuple[str, str], Schema] = {}

    def for_row(self, row_type: Label) -> Schema:
        """Return the schema for ``row_type`` at this object's version."""
        key = (type(row_type).__name__, label_text(row_type))
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        log.debug("Resolving schema for %s at version %s", key[1], self.version)
        schema = resolve(row_type, self.version, self.table)
        self._cache[key] = schema
        return schema

    def __repr__(self) -> str:
        return f"Mappings(version={self.version!r})"
