from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import pytest

from fec_pipeline.errors import FilingNotDownloaded, MalformedLine
from fec_pipeline.filing import Filing
from fec_pipeline.parse.detect import FS
from fec_pipeline.schema.patterns import RowType
from fec_pipeline.translate.record import Record


class FakeResponse:
    def __init__(self, content: bytes = b"", status: int = 200) -> None:
        self.content = content
        self.text = content.decode("utf-8")
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            import requests

            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def v8_filing(write_filing, f3x_summary, sa_row, sb_row) -> Filing:
    write_filing(723604, "8.0", [f3x_summary, sa_row, sb_row])
    return Filing(723604)


@pytest.fixture
def legacy_sa() -> dict[str, Any]:
    return {
        "form_type": "SA11AI",
        "filer_committee_id_number": "C00100000",
        "entity_type": "IND",
        "contributor_name": "Mr. Steve Aaker",
        "contributor_city": "FARGO",
        "contribution_date": "20041015",
        "contribution_amount": "100.00",
    }


def test_version_and_delimiter_come_from_header(v8_filing: Filing) -> None:
    assert v8_filing.version == "8.0"
    assert v8_filing.delimiter == FS


def test_file_location(tmp_path: Path) -> None:
    filing = Filing(723604)
    assert filing.file_name == "723604.fec"
    assert filing.file_path == tmp_path / "723604.fec"
    assert filing.filing_url == "https://docquery.fec.gov/dcdev/posted/723604.fec"


def test_header_and_summary(v8_filing: Filing) -> None:
    header = v8_filing.header()
    assert header["record_type"] == "HDR"
    assert header["fec_version"] == "8.0"
    assert header["soft_name"] == "TestSoft"

    summary = v8_filing.summary()
    assert summary.row_type == "F3XN"
    assert summary["committee_name"] == "FRIENDS OF TESTING"
    assert summary["col_a_6c_total_receipts"] == "750.00"
    assert summary["street_2"] is None


def test_summary_include(v8_filing: Filing) -> None:
    summary = v8_filing.summary(include=["coverage_through_date", "form_type"])
    assert list(summary) == ["form_type", "coverage_through_date"]


def test_rows_like_selectors(v8_filing: Filing) -> None:
    assert len(v8_filing.rows_like("sa")) == 1
    assert v8_filing.rows_like(RowType.SB)[0]["payee_organization_name"] == "PRINT SHOP LLC"
    assert len(v8_filing.rows_like(re.compile(r"^s[ab]"))) == 2
    assert v8_filing.rows_like(RowType.SE) == []


def test_rows_like_raw_and_include(v8_filing: Filing) -> None:
    raw = v8_filing.rows_like("sa", raw=True)
    assert raw[0][0] == "SA11AI"
    assert raw[0][4] is None

    rows = v8_filing.rows_like("sa", include=["contribution_amount"])
    assert rows == [{"contribution_amount": "250.00"}]


def test_rows_like_callback_streams(v8_filing: Filing) -> None:
    seen: list[Record] = []
    assert v8_filing.rows_like("s", callback=seen.append) is None
    assert [row.row_type for row in seen] == ["SA11AI", "SB21B"]


def test_each_row_skips_blank_lines(write_filing, sa_row) -> None:
    write_filing(5, "8.0", [sa_row], extra_lines=["", "   "])
    rows = list(Filing(5).each_row(with_index=True))
    assert [(row[0], index) for row, index in rows] == [("HDR", 0), ("SA11AI", 1)]


def test_parse_row_filters_on_row_type(v8_filing: Filing) -> None:
    row = ["SB21B", "C00431171"]
    assert v8_filing.parse_row(row, parse_if="sa") is None
    assert v8_filing.parse_row(row, parse_if=RowType.SB)["form_type"] == "SB21B"
    assert v8_filing.parse_row(row, raw=True) is row


def test_missing_file_raises(tmp_path: Path) -> None:
    filing = Filing(1)
    with pytest.raises(FilingNotDownloaded):
        filing.version
    with pytest.raises(FilingNotDownloaded):
        filing.rows_like("sa")


def test_schema_lookups_without_a_file(v8_filing: Filing) -> None:
    assert Filing.schema_for("SA11AI")[2] == "transaction_id"
    assert Filing.schema_for("SA11AI", "5.00")[3] == "contributor_name"
    assert v8_filing.map_for("sa") == Filing.schema_for("sa", "8.0")


def test_schema_lookups_accept_row_type_members(v8_filing: Filing) -> None:
    assert v8_filing.map_for(RowType.SC) == Filing.schema_for(RowType.SC, "8.0")
    assert v8_filing.map_for(RowType.SC)[0] == "form_type"
    assert v8_filing.map_for(RowType.F3) == Filing.schema_for("F3N", "8.0")
    assert v8_filing.map_for(RowType.H4) == Filing.schema_for("H4", "8.0")


def test_pac_rows_with_allocation_schedules_map_through(write_filing, sa_row) -> None:
    h4 = {
        "form_type": "H4",
        "filer_committee_id_number": "C00431171",
        "payee_organization_name": "PHONE BANK INC",
        "federal_share": "60.00",
        "nonfederal_share": "40.00",
    }
    sl = {"form_type": "SL1A", "account_name": "LEVIN", "col_a_total_receipts": "10.00"}
    write_filing(90, "8.0", [h4, sa_row, sl])
    rows = Filing(90).rows_like(re.compile(r"^(h\d|s)"))
    assert [row.row_type for row in rows] == ["H4", "SA11AI", "SL1A"]
    assert rows[0]["federal_share"] == "60.00"
    assert rows[2]["col_a_total_receipts"] == "10.00"


def test_translate_adds_rules_and_aliases(v8_filing: Filing) -> None:
    v8_filing.translate(lambda t: t.alias("amount", "contribution_amount", row="sa"))
    v8_filing.translate().convert(float, row="sa", field="contribution_amount")
    row = v8_filing.rows_like("sa")[0]
    assert row["amount"] == 250.0


def test_translate_packs_from_settings(
    monkeypatch: pytest.MonkeyPatch, write_filing, sa_row
) -> None:
    monkeypatch.setenv("FEC_TRANSLATIONS", "names")
    write_filing(9, "8.0", [sa_row])
    row = Filing(9, translate=["names", "dates"]).rows_like("sa")[0]
    assert row["contributor_name"] == "Mr. John Charles Smith III"
    assert row["contribution_date"].year == 2011


def test_amendment_detection(write_filing, f3x_summary) -> None:
    write_filing(10, "8.0", [f3x_summary])
    write_filing(11, "8.0", [f3x_summary], header={"report_id": "FEC-10"})
    assert Filing(10).amends is None
    assert not Filing(10).is_amendment
    assert Filing(11).amends == "FEC-10"
    assert Filing(11).is_amendment


def test_compare_summaries(write_filing, f3x_summary) -> None:
    write_filing(20, "8.0", [f3x_summary])
    write_filing(21, "8.0", [{**f3x_summary, "col_a_6c_total_receipts": "900.00"}])
    assert Filing(20).compare(Filing(21)) == ["col_a_6c_total_receipts"]
    assert Filing(20).compare(21) == ["col_a_6c_total_receipts"]
    assert Filing(20).compare(Filing(20)) == []


def test_hash_zip_skips_unlabeled_columns(v8_filing: Filing) -> None:
    record = v8_filing.hash_zip(["form_type", None, "amount"], ["SA11AI", "x", "5"])
    assert record.row_type == "SA11AI"
    assert dict(record) == {"form_type": "SA11AI", "amount": "5"}


def test_legacy_comma_filing(write_filing, legacy_sa) -> None:
    write_filing(30, "5.00", [legacy_sa])
    filing = Filing(30, translate="names")
    assert filing.version == "5.00"
    assert filing.delimiter == ","
    assert filing.header()["name_delim"] is None
    row = filing.rows_like("sa")[0]
    assert row["contributor_city"] == "FARGO"
    assert row["contributor_last_name"] == "Aaker"


def test_malformed_line_is_recovered(write_filing) -> None:
    write_filing(40, "5.00", [], extra_lines=['SA11AI,C00100000,IND,"Bad "x" name",12 ELM ST'])
    row = Filing(40).rows_like("sa")[0]
    assert row["contributor_name"] == '"Bad "x" name"'
    assert row["contributor_street_1"] == "12 ELM ST"


def test_malformed_line_raises_without_recovery(write_filing) -> None:
    write_filing(41, "5.00", [], extra_lines=['SA11AI,C00100000,IND,"Bad "x" name"'])
    with pytest.raises(MalformedLine):
        Filing(41, recover=False).rows_like("sa")


def test_download_uses_cache(
    monkeypatch: pytest.MonkeyPatch, write_filing, f3x_summary
) -> None:
    import requests

    def fail(*args, **kwargs):
        raise AssertionError("network used for a cached filing")

    monkeypatch.setattr(requests, "get", fail)
    write_filing(50, "8.0", [f3x_summary])
    assert Filing(50).download().version == "8.0"


def test_download_fetches_missing_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    import requests

    calls: list[tuple[str, dict]] = []
    body = FS.join(["HDR", "FEC", "8.0", "Soft", "1"]).encode("utf-8") + b"\n"

    def fake_get(url, headers=None, timeout=None):
        calls.append((url, headers))
        return FakeResponse(body)

    monkeypatch.setattr(requests, "get", fake_get)
    filing = Filing(60, download_dir=tmp_path / "cache").download()
    assert filing.file_path.read_bytes() == body
    assert calls == [
        ("https://docquery.fec.gov/dcdev/posted/60.fec", {"User-Agent": "fec-pipeline-tests"})
    ]
    assert filing.version == "8.0"


def test_download_raises_on_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    import requests

    monkeypatch.setattr(requests, "get", lambda *a, **kw: FakeResponse(b"", status=404))
    with pytest.raises(requests.HTTPError):
        Filing(70).download()


def test_end_to_end_v7_schedule_a_row(write_filing, sa_row) -> None:
    write_filing(80, "7.0", [sa_row])
    filing = Filing(80)
    raw = filing.rows_like(RowType.SA, raw=True)[0]
    record = filing.map(raw)
    schema = filing.map_for(raw[0])
    assert record["form_type"] == raw[0] == "SA11AI"
    assert len(record) == len({name for name in schema if name is not None})
