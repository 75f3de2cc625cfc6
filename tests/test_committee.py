from __future__ import annotations

import pytest

from fec_pipeline.ingest.committee import Committee

LISTING = """
<html><body><table>
<tr><td><a href='767437/'>767437</a></td></tr>
<tr><td><a href='723604/'>723604</a></td></tr>
</table></body></html>
"""


class FakeResponse:
    def __init__(self, text: str) -> None:
        self.text = text

    def raise_for_status(self) -> None:
        return None


def test_filings_url() -> None:
    committee = Committee("C00431171", forms_url="https://example.test/forms")
    assert committee.filings_url == "https://example.test/forms/C00431171/"


def test_filing_ids_fetches_once(monkeypatch: pytest.MonkeyPatch) -> None:
    import requests

    calls: list[str] = []

    def fake_get(url, headers=None, timeout=None):
        calls.append(url)
        return FakeResponse(LISTING)

    monkeypatch.setattr(requests, "get", fake_get)
    committee = Committee("C00431171", forms_url="https://example.test/forms/")
    assert committee.filing_ids() == ["767437", "723604"]
    assert committee.filing_ids() == ["767437", "723604"]
    assert calls == ["https://example.test/forms/C00431171/"]
