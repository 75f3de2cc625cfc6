"""Utilities to locate and download raw `.fec` filing files."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)

BASE = "https://docquery.fec.gov/dcdev/posted"


def filing_file_name(filing_id: int | str) -> str:
    return f"{filing_id}.fec"


def filing_url(filing_id: int | str, base_url: str = BASE) -> str:
    """Return the URL of the raw `.fec` file for a filing id.

    Args:
        filing_id: Electronic filing id (e.g. 723604).
        base_url: Directory URL serving raw filings.
    """
    return f"{base_url.rstrip('/')}/{filing_file_name(filing_id)}"


def download_filing(
    filing_id: int | str,
    out_dir: Path,
    user_agent: str,
    base_url: str = BASE,
    force: bool = False,
) -> Path:
    """Download or return the cached `.fec` file for a filing.

    Args:
        filing_id: Electronic filing id.
        out_dir: Local directory where filings are cached.
        user_agent: User-Agent header value to send with the request.
        base_url: Directory URL serving raw filings.
        force: Download even if a non-empty cached copy exists.

    Returns:
        Path to the downloaded (or cached) file.

    Raises:
        requests.HTTPError if the remote request fails (non-2xx status).
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    url = filing_url(filing_id, base_url)
    out_path = out_dir / filing_file_name(filing_id)

    if not force and out_path.exists() and out_path.stat().st_size > 0:
        log.info("Cache hit: %s", out_path)
        return out_path

    log.info("Downloading %s", url)
    import requests  # type: ignore[import-untyped]  # local import
    r = requests.get(url, headers={"User-Agent": user_agent}, timeout=60)
    r.raise_for_status()
    out_path.write_bytes(r.content)
    log.info("Saved: %s (%d bytes)", out_path, out_path.stat().st_size)
    return out_path
