"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the environment (and the project's `.env`) for download locations,
FEC endpoints, parsing defaults and the optional MongoDB sink.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tempfile

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

@dataclass(frozen=True)
class Settings:
    """Container for pipeline configuration read from the environment.

    Attributes:
        download_dir: Local directory where `<filing_id>.fec` files live.
        filing_base_url: Base URL that serves raw `.fec` files by id.
        forms_url: FEC electronic filing forms endpoint (committee listings, search).
        user_agent: User-Agent header sent with every request.
        quote_char: Quote character used when splitting filing lines.
        encoding: Text encoding of downloaded filings.
        translations: Names of bundled translation packs enabled on every filing.
        mongo_uri: MongoDB connection URI for the optional row sink.
        mongo_db: Target MongoDB database name.
    """
    download_dir: Path
    filing_base_url: str
    forms_url: str
    user_agent: str
    quote_char: str
    encoding: str
    translations: tuple[str, ...]
    mongo_uri: str
    mongo_db: str


def _split_list(raw: str) -> tuple[str, ...]:
    """Split a comma separated environment value into trimmed, non-empty items."""
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `FEC_QUOTE_CHAR` is not exactly one character.
    """
    download_dir = Path(os.getenv("FEC_DATA_DIR", tempfile.gettempdir()))
    filing_base_url = os.getenv(
        "FEC_BASE_URL", "https://docquery.fec.gov/dcdev/posted"
    ).rstrip("/")
    forms_url = os.getenv("FEC_FORMS_URL", "https://docquery.fec.gov/cgi-bin/dcdev/forms/")
    user_agent = os.getenv("FEC_USER_AGENT", "fec-pipeline").strip()
    quote_char = os.getenv("FEC_QUOTE_CHAR", '"')
    encoding = os.getenv("FEC_ENCODING", "utf-8")
    translations = _split_list(os.getenv("FEC_TRANSLATIONS", ""))
    mongo_uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    mongo_db = os.getenv("MONGO_DB", "fec")

    if len(quote_char) != 1:
        raise RuntimeError(
            "FEC_QUOTE_CHAR must be a single character "
            f"(got {quote_char!r})."
        )

    return Settings(
        download_dir=download_dir,
        filing_base_url=filing_base_url,
        forms_url=forms_url,
        user_agent=user_agent,
        quote_char=quote_char,
        encoding=encoding,
        translations=translations,
        mongo_uri=mongo_uri,
        mongo_db=mongo_db,
    )
