from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from fec_pipeline.cli import build_parser, main

pytestmark = pytest.mark.usefixtures("restore_logging")

RESULTS = """
<p>FRIENDS OF TESTING - C00431171<br>
FEC-767437 Form F3N - period 10/01/2011-12/31/2011, filed 01/31/2012 - NEW<br></p>
"""


class FakeResponse:
    def __init__(self, text: str) -> None:
        self.text = text

    def raise_for_status(self) -> None:
        return None


def run(capsys: pytest.CaptureFixture[str], tmp_path: Path, *argv: str) -> list[str]:
    main(["--log-level", "WARNING", "--download-dir", str(tmp_path), *argv])
    return [line for line in capsys.readouterr().out.splitlines() if line]


def test_parser_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_rejects_unknown_pack() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--translate", "nope", "header", "1"])


def test_summary_prints_selected_fields(capsys, tmp_path, write_filing, f3x_summary) -> None:
    write_filing(1, "8.0", [f3x_summary])
    lines = run(capsys, tmp_path, "summary", "1", "--include", "form_type, committee_name")
    assert json.loads(lines[-1]) == {"form_type": "F3XN", "committee_name": "FRIENDS OF TESTING"}


def test_rows_prints_json_lines(capsys, tmp_path, write_filing, sa_row, sb_row) -> None:
    write_filing(1, "8.0", [sa_row, sb_row, sa_row])
    lines = run(capsys, tmp_path, "--translate", "dates", "rows", "1", "sa")
    rows = [json.loads(line) for line in lines]
    assert len(rows) == 2
    assert rows[0]["contribution_date"] == "2011-03-22"


def test_rows_exports_csv(capsys, tmp_path, write_filing, sa_row) -> None:
    write_filing(1, "8.0", [sa_row])
    out = tmp_path / "out" / "sa.csv"
    run(capsys, tmp_path, "rows", "1", "sa", "--include", "contribution_amount", "--csv", str(out))
    pdf = pd.read_csv(out, dtype=str)
    assert pdf.to_dict("records") == [
        {"filing_id": "1", "row_type": "SA11AI", "contribution_amount": "250.00"}
    ]


def test_compare_prints_changed_summary_fields(capsys, tmp_path, write_filing, f3x_summary) -> None:
    write_filing(1, "8.0", [f3x_summary])
    write_filing(2, "8.0", [{**f3x_summary, "committee_name": "FRIENDS OF TESTS"}])
    lines = run(capsys, tmp_path, "compare", "1", "2")
    assert json.loads(lines[-1]) == {"committee_name": "FRIENDS OF TESTS"}


def test_committee_lists_filing_ids(capsys, tmp_path, monkeypatch) -> None:
    import requests

    monkeypatch.setattr(requests, "get", lambda *a, **kw: FakeResponse("<a href='12/'>12</a>"))
    assert run(capsys, tmp_path, "committee", "C00431171") == ["12"]


def test_search_prints_results(capsys, tmp_path, monkeypatch) -> None:
    import requests

    posted: list[dict] = []

    def fake_post(url, data=None, headers=None, timeout=None):
        posted.append(data)
        return FakeResponse(RESULTS)

    monkeypatch.setattr(requests, "post", fake_post)
    lines = run(capsys, tmp_path, "search", "--committee-id", "C00431171", "--date", "2012-01-31")
    result = json.loads(lines[-1])
    assert result["filing_id"] == "767437"
    assert result["date_filed"] == "2012-01-31"
    assert posted[0]["date"] == "01/31/2012"
