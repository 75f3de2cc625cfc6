from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any

import pytest

from fec_pipeline.parse.detect import delimiter_for
from fec_pipeline.schema.mappings import resolve

WriteFiling = Callable[..., Path]


def build_line(values: Mapping[str, Any], version: str, delimiter: str) -> str:
    """Lay out ``values`` in schema order for the row's type and ``version``."""
    row_type = values.get("form_type") or values["record_type"]
    schema = resolve(row_type, version)
    cells = []
    for name in schema:
        value = values.get(name) if name is not None else None
        cells.append("" if value is None else str(value))
    return delimiter.join(cells)


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEC_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FEC_USER_AGENT", "fec-pipeline-tests")
    for name in ("FEC_TRANSLATIONS", "FEC_QUOTE_CHAR", "FEC_ENCODING", "FEC_BASE_URL", "FEC_FORMS_URL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Undo handler and level changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_filing(tmp_path: Path) -> WriteFiling:
    """Return a helper writing ``<tmp_path>/<filing_id>.fec`` from row dicts."""

    def _write(
        filing_id: int | str,
        version: str,
        rows: list[Mapping[str, Any]],
        header: Mapping[str, Any] | None = None,
        extra_lines: list[str] | None = None,
    ) -> Path:
        delimiter = delimiter_for(version)
        head = {
            "record_type": "HDR",
            "ef_type": "FEC",
            "fec_version": version,
            "soft_name": "TestSoft",
            "soft_ver": "1.0",
            **(header or {}),
        }
        lines = [build_line(head, version, delimiter)]
        lines += [build_line(row, version, delimiter) for row in rows]
        lines += extra_lines or []
        path = tmp_path / f"{filing_id}.fec"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def f3x_summary() -> dict[str, Any]:
    return {
        "form_type": "F3XN",
        "filer_committee_id_number": "C00431171",
        "committee_name": "FRIENDS OF TESTING",
        "street_1": "1 MAIN ST",
        "city": "COLUMBIA",
        "state": "SC",
        "zip_code": "29201",
        "report_code": "Q1",
        "coverage_from_date": "20110101",
        "coverage_through_date": "20110331",
        "qualified_committee": "X",
        "treasurer_last_name": "JONES",
        "treasurer_first_name": "ANN",
        "date_signed": "20110415",
        "col_a_6b_cash_on_hand_beginning_period": "1000.00",
        "col_a_6c_total_receipts": "750.00",
        "col_a_7_total_disbursements": "300.00",
    }


@pytest.fixture
def sa_row() -> dict[str, Any]:
    return {
        "form_type": "SA11AI",
        "filer_committee_id_number": "C00431171",
        "transaction_id": "SA11AI.4123",
        "entity_type": "IND",
        "contributor_prefix": "Mr.",
        "contributor_first_name": "John",
        "contributor_middle_name": "Charles",
        "contributor_last_name": "Smith",
        "contributor_suffix": "III",
        "contributor_street_1": "12 OAK LN",
        "contributor_city": "GREENVILLE",
        "contributor_state": "SC",
        "contributor_zip_code": "298608420",
        "election_code": "P2012",
        "contribution_date": "20110322",
        "contribution_amount": "250.00",
        "contribution_aggregate": "500.00",
        "contributor_employer": "SELF",
        "contributor_occupation": "ATTORNEY",
    }


@pytest.fixture
def sb_row() -> dict[str, Any]:
    return {
        "form_type": "SB21B",
        "filer_committee_id_number": "C00431171",
        "transaction_id_number": "SB21B.100",
        "entity_type": "ORG",
        "payee_organization_name": "PRINT SHOP LLC",
        "payee_city": "COLUMBIA",
        "payee_state": "SC",
        "expenditure_date": "20110210",
        "expenditure_amount": "125.50",
        "expenditure_purpose_descrip": "PRINTING",
    }
