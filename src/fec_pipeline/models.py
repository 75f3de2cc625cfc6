"""Pydantic models for search results and loaded rows.

`SearchResult` describes one hit of the FEC electronic filing search and
`MappedRowDoc` is the envelope under which mapped rows are stored in MongoDB.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from fec_pipeline.filing import Filing

SEARCH_DATE_FORMAT = "%m/%d/%Y"


def _parse_search_date(value: Any) -> Any:
    if isinstance(value, str):
        return datetime.strptime(value.strip(), SEARCH_DATE_FORMAT).date()
    return value


class FilingPeriod(BaseModel):
    """Coverage period of a report, as listed in search results."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    start: date
    end: date

    @classmethod
    def parse(cls, period: str | None) -> FilingPeriod | None:
        """Parse ``"MM/DD/YYYY-MM/DD/YYYY"``; None stays None."""
        if period is None:
            return None
        start, end = period.split("-", 1)
        return cls(start=_parse_search_date(start), end=_parse_search_date(end))


class SearchResult(BaseModel):
    """One filing returned by the electronic filing search.

    Attributes:
        committee_name: Name of the filing committee.
        committee_id: FEC committee id (``C`` followed by eight digits).
        filing_id: Electronic filing id.
        form_type: Form type including the amendment letter (e.g. ``F3N``).
        period: Coverage period, for periodic reports.
        date_filed: Date the filing was received.
        description: Free-text description that follows the filing date.
        amended_by: Id of the filing that amends this one, if listed.
    """
    model_config = ConfigDict(extra="forbid")
    committee_name: str
    committee_id: str = Field(..., pattern=r"^C\d{8}$")
    filing_id: str
    form_type: str
    period: FilingPeriod | None = None
    date_filed: date
    description: str | None = None
    amended_by: str | None = None

    @field_validator("period", mode="before")
    @classmethod
    def _period(cls, value: Any) -> Any:
        return FilingPeriod.parse(value) if isinstance(value, str) else value

    @field_validator("date_filed", mode="before")
    @classmethod
    def _date_filed(cls, value: Any) -> Any:
        return _parse_search_date(value)

    def filing(self, download_dir: Path | None = None) -> Filing:
        """Return a `Filing` for this result (not yet downloaded)."""
        from fec_pipeline.filing import Filing

        return Filing(self.filing_id, download_dir=download_dir)


class MappedRowDoc(BaseModel):
    """Envelope for a mapped row stored in MongoDB.

    Attributes:
        row_key: ``"<filing_id>:<row_index>"``, unique per stored row.
        filing_id: Filing the row was read from.
        row_index: Zero-based line index of the row within the filing.
        row_type: The row's first value (e.g. ``SA11AI``).
        version: Version declared by the filing's header.
        data: The mapped record.
        ingest_ts: Timestamp when the row was loaded.
    """
    model_config = ConfigDict(extra="forbid")
    row_key: str
    filing_id: str
    row_index: int = Field(..., ge=0)
    row_type: str
    version: str
    data: dict[str, Any]
    ingest_ts: datetime
