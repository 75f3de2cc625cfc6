"""Listing of a committee's electronic filings.

The FEC serves one HTML page per committee that links every electronic
filing it has submitted; links end in ``'<filing_id>/'``.
"""

from __future__ import annotations

import logging
import re

from fec_pipeline.config import get_settings

log = logging.getLogger(__name__)

FILING_LINK_RE = re.compile(r"'(\d+)/'")


class Committee:
    """A committee whose filing ids can be listed.

    Args:
        committee_id: FEC committee id (e.g. ``"C00431171"``).
        forms_url: Base URL of the electronic filing forms endpoint.
    """

    def __init__(self, committee_id: str, forms_url: str | None = None) -> None:
        self.committee_id = committee_id
        self.forms_url = forms_url or get_settings().forms_url
        self._page: str | None = None

    @property
    def filings_url(self) -> str:
        return f"{self.forms_url.rstrip('/')}/{self.committee_id}/"

    def filing_list_page(self) -> str:
        """Return the committee's listing page, fetched on first use only."""
        if self._page is None:
            import requests  # type: ignore[import-untyped]

            log.info("Fetching filing list for %s", self.committee_id)
            r = requests.get(
                self.filings_url,
                headers={"User-Agent": get_settings().user_agent},
                timeout=60,
            )
            r.raise_for_status()
            self._page = r.text
        return self._page

    def filing_ids(self) -> list[str]:
        """Return the ids of every filing linked from the listing page, in page order."""
        return FILING_LINK_RE.findall(self.filing_list_page())
