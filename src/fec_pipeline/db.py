"""MongoDB helpers and bulk upsert utility.

Centralizes creation of Mongo clients and the batched upsert used to store
mapped rows.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import certifi
from pymongo import MongoClient, UpdateOne
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

log = logging.getLogger(__name__)


def get_client(uri: str) -> MongoClient:
    """Return a configured PyMongo MongoClient for the provided URI.

    TLS with the certifi CA bundle is enabled for ``mongodb+srv://`` URIs
    (hosted clusters); plain ``mongodb://`` URIs connect as given.

    Args:
        uri: MongoDB connection URI.

    Returns:
        Configured MongoClient instance.
    """
    options: dict[str, Any] = {
        "serverSelectionTimeoutMS": 30000,
        "socketTimeoutMS": 30000,
        "connectTimeoutMS": 30000,
    }
    if uri.startswith("mongodb+srv://"):
        options.update(tls=True, tlsCAFile=certifi.where())
    return MongoClient(uri, **options)


def get_db(
    client: MongoClient[dict[str, Any]],
    db_name: str,
) -> Database[dict[str, Any]]:
    """Return the named Database instance from a MongoClient."""
    return client[db_name]


def _write(collection: Collection[dict[str, Any]], ops: list[UpdateOne]) -> int:
    try:
        result = collection.bulk_write(ops, ordered=False)
    except PyMongoError as e:
        log.warning("bulk_upsert batch of %d failed: %s", len(ops), e)
        return 0
    return result.upserted_count + result.modified_count


def bulk_upsert(
    collection: Collection[dict[str, Any]],
    docs: Iterable[dict[str, Any]],
    key_field: str,
    batch_size: int = 1000,
) -> int:
    """Bulk upsert documents using `key_field` as the selector.

    Documents are written in unordered batches. A failed batch is logged and
    skipped so one bad batch does not stop the load; documents lacking
    `key_field` are skipped.

    Args:
        collection: Target PyMongo collection.
        docs: Iterable of document dictionaries to upsert.
        key_field: Document key to use for upsert selector.
        batch_size: Number of ops per bulk_write call.

    Returns:
        Number of documents inserted or modified.
    """
    ops: list[UpdateOne] = []
    written = 0

    for d in docs:
        if key_field not in d:
            log.debug("Skipping document without %s", key_field)
            continue

        ops.append(UpdateOne({key_field: d[key_field]}, {"$set": d}, upsert=True))

        if len(ops) >= batch_size:
            written += _write(collection, ops)
            ops.clear()

    if ops:
        written += _write(collection, ops)

    return written
