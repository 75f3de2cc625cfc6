"""Tabulation of mapped rows.

`rows_to_pandas` turns the rows of one filing into a pandas DataFrame and
`rows_to_dask` concatenates many filings into a Dask DataFrame, one filing
per partition.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable
from typing import Any, cast

import dask.dataframe as dd
import pandas as pd

from fec_pipeline.filing import Filing
from fec_pipeline.schema.patterns import Label

log = logging.getLogger(__name__)


def rows_to_pandas(
    filing: Filing,
    row_type: Label,
    include: Collection[str] | None = None,
) -> pd.DataFrame:
    """Return the rows of ``filing`` matching ``row_type`` as a DataFrame.

    Each row also carries `filing_id` and `row_type` columns. Columns follow
    the order in which fields first appear across the rows.

    Args:
        filing: A downloaded filing.
        row_type: Row-type selector (see `Filing.rows_like`).
        include: Optional field names to keep.

    Returns:
        pandas.DataFrame with one row per matching line; empty if none match.
    """
    records: list[dict[str, Any]] = []
    for row in filing.iter_rows_like(row_type, include=include):
        records.append({"filing_id": filing.filing_id, "row_type": row.row_type, **row})

    log.info("Tabulated %d %s rows from filing %s", len(records), row_type, filing.filing_id)
    return pd.DataFrame(records)


def rows_to_dask(
    filings: Iterable[Filing],
    row_type: Label,
    include: Collection[str] | None = None,
) -> Any:
    """Concatenate the matching rows of many filings into a Dask DataFrame.

    Filings whose rows differ in columns (e.g. different versions) are
    aligned by name; missing values become NaN.

    Returns:
        Dask DataFrame, or an empty single-partition frame when no filing is given.
    """
    parts: list[Any] = []
    dd_mod = cast(Any, dd)
    for filing in filings:
        pdf = rows_to_pandas(filing, row_type, include=include)
        if pdf.empty:
            continue
        parts.append(dd_mod.from_pandas(pdf, npartitions=1))

    if not parts:
        return dd_mod.from_pandas(pd.DataFrame(), npartitions=1)

    return dd_mod.concat(parts, interleave_partitions=True)
