"""Upsert of a filing's mapped rows into MongoDB.

Rows are keyed by ``"<filing_id>:<row_index>"`` so that reloading a filing
replaces its rows instead of duplicating them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime, timezone
from typing import Any

from pymongo.collection import Collection

from fec_pipeline.db import bulk_upsert
from fec_pipeline.filing import Filing
from fec_pipeline.models import MappedRowDoc
from fec_pipeline.schema.patterns import Label, canonicalize

log = logging.getLogger(__name__)

BATCH_SIZE = 1000


def iter_row_docs(filing: Filing, row_type: Label) -> Iterator[dict[str, Any]]:
    """Yield a JSON-ready document for every ``row_type`` row of ``filing``.

    Values that BSON cannot store (dates from the ``dates`` pack) are
    serialized to ISO strings.
    """
    matcher = canonicalize(row_type)
    ingest_ts = datetime.now(timezone.utc)
    for row, index in filing.each_row(with_index=True):
        if not row or not matcher.search((row[0] or "").lower()):
            continue
        record = filing.map(row)
        doc = MappedRowDoc(
            row_key=f"{filing.filing_id}:{index}",
            filing_id=filing.filing_id,
            row_index=index,
            row_type=record.row_type or "",
            version=filing.version,
            data=dict(record),
            ingest_ts=ingest_ts,
        )
        yield doc.model_dump(mode="json")


def load_rows_to_mongo(
    filing: Filing,
    row_type: Label,
    collection: Collection[dict[str, Any]],
    batch_size: int = BATCH_SIZE,
) -> int:
    """Upsert the ``row_type`` rows of ``filing`` into ``collection``.

    Returns:
        Number of documents inserted or modified.
    """
    log.info("Loading %s rows of filing %s into %s", row_type, filing.filing_id, collection.name)
    written = bulk_upsert(collection, iter_row_docs(filing, row_type), "row_key", batch_size)
    log.info("Loaded %d documents from filing %s.", written, filing.filing_id)
    return written
