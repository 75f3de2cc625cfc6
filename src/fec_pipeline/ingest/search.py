"""Client for the FEC electronic filing search form.

The form is posted with the search parameters and answers with an HTML
listing. Every committee in the listing is introduced by a line
``<COMMITTEE NAME> - C00000000`` and followed by one line per filing:

    FEC-767437 Form F3N  - period 10/01/2011-12/31/2011, filed 01/31/2012 - NEW

A filing that has since been amended is followed by a line naming the
amending filing (``Amended by FEC-767500``). Searches with a date list one
committee line per filing, searches without a date group several filings
under each committee; both read the same way once the page is reduced to
its text lines.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from datetime import date
from typing import Any

from bs4 import BeautifulSoup

from fec_pipeline.config import get_settings
from fec_pipeline.models import SEARCH_DATE_FORMAT, SearchResult

log = logging.getLogger(__name__)

COMMITTEE_RE = re.compile(r"^(?P<committee_name>.+?)\s-\s(?P<committee_id>C\d{8})$")
FILING_RE = re.compile(
    r"FEC-(?P<filing_id>\d+)\s+Form\s+(?P<form_type>F\S*)\s*-\s*"
    r"(?:period\s(?P<period>[-/\d]+),\s)?"
    r"filed\s(?P<filed>[/\d]+)"
    r"(?:\s-\s(?P<description>.*?))?\s*$"
)
AMENDMENT_RE = re.compile(r"FEC-(?P<amendment>\d+)")

# search keyword → form field name
PARAM_NAMES = {
    "committee_id": "comid",
    "committee_name": "name",
    "state": "state",
    "party": "party",
    "committee_type": "type",
    "report_type": "rpttype",
    "date": "date",
    "form_type": "frmtype",
}


def make_params(**search_params: Any) -> dict[str, str]:
    """Translate search keywords into the form fields the search expects.

    Raises:
        ValueError: for an unknown keyword.
    """
    unknown = set(search_params) - set(PARAM_NAMES)
    if unknown:
        raise ValueError(f"Unknown search parameters: {', '.join(sorted(unknown))}")

    params = {}
    for key, form_name in PARAM_NAMES.items():
        value = search_params.get(key)
        if isinstance(value, date):
            value = value.strftime(SEARCH_DATE_FORMAT)
        params[form_name] = "" if value is None else str(value)
    return params


def page_lines(html: str) -> list[str]:
    """Reduce a results page to its non-empty text lines; ``<br>`` ends a line."""
    soup = BeautifulSoup(html, "html.parser")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    lines = (" ".join(line.split()) for line in soup.get_text().splitlines())
    return [line for line in lines if line]


def parse_results(html: str) -> Iterator[SearchResult]:
    """Yield a `SearchResult` for every filing listed on a results page."""
    committee: dict[str, str] | None = None
    pending: dict[str, Any] | None = None

    for line in page_lines(html):
        filing = FILING_RE.search(line)
        if filing:
            if pending is not None:
                yield SearchResult(**pending)
            if committee is None:
                log.warning("Filing listed before any committee: %s", line)
                pending = None
                continue
            pending = {
                **committee,
                "filing_id": filing["filing_id"],
                "form_type": filing["form_type"],
                "period": filing["period"],
                "date_filed": filing["filed"],
                "description": filing["description"] or None,
                "amended_by": None,
            }
            continue

        found = COMMITTEE_RE.match(line)
        if found:
            if pending is not None:
                yield SearchResult(**pending)
                pending = None
            committee = {
                "committee_name": found["committee_name"],
                "committee_id": found["committee_id"],
            }
            continue

        amendment = AMENDMENT_RE.search(line)
        if amendment and pending is not None:
            pending["amended_by"] = amendment["amendment"]

    if pending is not None:
        yield SearchResult(**pending)


class Search:
    """A search of the FEC electronic filing database.

    Args:
        search_url: Form endpoint; defaults to the configured forms URL.
        **search_params: Any of ``committee_id``, ``committee_name``, ``state``,
            ``party``, ``committee_type``, ``report_type``, ``date`` (a `date`)
            and ``form_type``.
    """

    def __init__(self, search_url: str | None = None, **search_params: Any) -> None:
        self.search_params = make_params(**search_params)
        self.search_url = search_url or get_settings().forms_url
        self._body: str | None = None

    def search(self) -> str:
        """Post the search form and return the response body."""
        import requests  # type: ignore[import-untyped]

        log.info("Searching electronic filings: %s", {k: v for k, v in self.search_params.items() if v})
        r = requests.post(
            self.search_url,
            data=self.search_params,
            headers={"User-Agent": get_settings().user_agent},
            timeout=60,
        )
        r.raise_for_status()
        self._body = r.text
        return self._body

    @property
    def body(self) -> str:
        if self._body is None:
            return self.search()
        return self._body

    def results(
        self, callback: Callable[[SearchResult], None] | None = None
    ) -> list[SearchResult] | None:
        """Return every result, or pass each to ``callback`` and return None."""
        if callback is None:
            return list(parse_results(self.body))
        for result in parse_results(self.body):
            callback(result)
        return None
