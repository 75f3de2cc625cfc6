"""A single FEC electronic filing and its query surface.

A `Filing` is identified by its id and backed by a local ``<id>.fec`` file.
The header line is read once to learn the filing's version (and with it the
delimiter); every other query streams the file line by line and maps only the
rows that are asked for.

Example:
    filing = Filing(723604, translate=["names", "dates"])
    filing.download()
    for row in filing.iter_rows_like(RowType.SA):
        print(row["contributor_name"], row["contribution_amount"])
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

from fec_pipeline import DEFAULT_VERSION
from fec_pipeline.compare import hash_diff
from fec_pipeline.config import get_settings
from fec_pipeline.errors import FilingNotDownloaded
from fec_pipeline.ingest.fetch_filing import download_filing, filing_file_name, filing_url
from fec_pipeline.mapper import RecordMapper
from fec_pipeline.parse.delimited import Row, iter_rows
from fec_pipeline.parse.detect import delimiter_for, detect_file
from fec_pipeline.schema.mappings import Mappings, Schema, resolve
from fec_pipeline.schema.patterns import Label, canonicalize
from fec_pipeline.translate.record import Record
from fec_pipeline.translate.translator import Translator

log = logging.getLogger(__name__)


class Filing:
    """An electronic filing read from ``<download_dir>/<filing_id>.fec``.

    Args:
        filing_id: Electronic filing id.
        download_dir: Directory holding the file; defaults to ``FEC_DATA_DIR``.
        translate: Names of bundled translation packs to enable, in addition
            to those listed in ``FEC_TRANSLATIONS``.
        quote_char: Quote character of the file; defaults to ``FEC_QUOTE_CHAR``.
        recover: Repair lines with broken quoting instead of raising.
        encoding: Text encoding of the file; defaults to ``FEC_ENCODING``.
    """

    def __init__(
        self,
        filing_id: int | str,
        download_dir: Path | str | None = None,
        translate: Iterable[str] | str | None = None,
        quote_char: str | None = None,
        recover: bool = True,
        encoding: str | None = None,
    ) -> None:
        settings = get_settings()
        self.filing_id = str(filing_id)
        self.download_dir = Path(download_dir) if download_dir is not None else settings.download_dir
        self.quote_char = quote_char or settings.quote_char
        self.encoding = encoding or settings.encoding
        self.recover = recover
        self._settings = settings

        packs = list(settings.translations)
        if translate:
            packs.extend([translate] if isinstance(translate, str) else translate)
        self.translator = Translator(include=list(dict.fromkeys(packs)))

        self._version: str | None = None
        self._mappings: Mappings | None = None

    def __repr__(self) -> str:
        return f"Filing({self.filing_id!r})"

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------
    @property
    def file_name(self) -> str:
        return filing_file_name(self.filing_id)

    @property
    def file_path(self) -> Path:
        return self.download_dir / self.file_name

    @property
    def filing_url(self) -> str:
        return filing_url(self.filing_id, self._settings.filing_base_url)

    def download(self, force: bool = False) -> Filing:
        """Fetch the raw file unless it is already cached; returns self."""
        download_filing(
            self.filing_id,
            self.download_dir,
            self._settings.user_agent,
            base_url=self._settings.filing_base_url,
            force=force,
        )
        return self

    # ------------------------------------------------------------------
    # Format
    # ------------------------------------------------------------------
    def _require_file(self) -> Path:
        if not self.file_path.exists():
            raise FilingNotDownloaded(self.file_path)
        return self.file_path

    @property
    def version(self) -> str:
        """Version of the software that produced the file, read from the header once."""
        if self._version is None:
            detected = detect_file(self._require_file(), self.encoding, self.quote_char)
            log.debug("Filing %s declares version %r", self.filing_id, detected.version)
            self._version = detected.version
        return self._version

    @property
    def delimiter(self) -> str:
        return delimiter_for(self.version)

    @property
    def mappings(self) -> Mappings:
        if self._mappings is None:
            self._mappings = Mappings(self.version)
        return self._mappings

    @property
    def mapper(self) -> RecordMapper:
        return RecordMapper(self.mappings, self.translator)

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------
    def each_row(self, with_index: bool = False) -> Iterator[Any]:
        """Yield the raw values of every non-blank line.

        Args:
            with_index: Yield ``(row, index)`` pairs instead of bare rows.

        Raises:
            FilingNotDownloaded: if the file is not on disk.
        """
        path = self._require_file()
        delimiter = self.delimiter
        with path.open("r", encoding=self.encoding, errors="replace", newline="") as fh:
            rows = iter_rows(fh, delimiter, self.quote_char, recover=self.recover)
            for index, row in enumerate(rows):
                yield (row, index) if with_index else row

    def header(self, include: Collection[str] | None = None) -> Record | None:
        """Return the mapped header (first) row."""
        for row in self.each_row():
            return self.parse_row(row, include=include)
        return None

    def summary(self, include: Collection[str] | None = None) -> Record | None:
        """Return the mapped summary (second) row, the form's top-level totals."""
        for row, index in self.each_row(with_index=True):
            if index == 1:
                return self.parse_row(row, include=include)
        return None

    def iter_rows_like(
        self,
        row_type: Label,
        include: Collection[str] | None = None,
        raw: bool = False,
    ) -> Iterator[Record | Row]:
        """Yield every row whose type matches ``row_type``, mapped unless ``raw``."""
        for row in self.each_row():
            value = self.parse_row(row, parse_if=row_type, include=include, raw=raw)
            if value is not None:
                yield value

    def rows_like(
        self,
        row_type: Label,
        include: Collection[str] | None = None,
        raw: bool = False,
        callback: Callable[[Record | Row], None] | None = None,
    ) -> list[Record | Row] | None:
        """Return every matching row, or stream each one to ``callback``.

        Args:
            row_type: Row-type keyword, RowType member, free text or pattern.
            include: Field names to keep in each record.
            raw: Return raw value lists instead of records.
            callback: When given, called once per row and None is returned;
                rows are never collected.
        """
        rows = self.iter_rows_like(row_type, include=include, raw=raw)
        if callback is None:
            return list(rows)
        for row in rows:
            callback(row)
        return None

    def parse_row(
        self,
        row: Row,
        parse_if: Label | None = None,
        include: Collection[str] | None = None,
        raw: bool = False,
    ) -> Record | Row | None:
        """Map ``row`` unless ``parse_if`` is given and does not match its type.

        Returns:
            The mapped record, the raw row when ``raw`` is set, or None when
            the row type does not match.
        """
        if parse_if is not None:
            row_type = (row[0] or "") if row else ""
            if not canonicalize(parse_if).search(row_type.lower()):
                return None
        return row if raw else self.map(row, include=include)

    def map(self, row: Sequence[str | None], include: Collection[str] | None = None) -> Record:
        """Map raw values to a record using this filing's version and translator."""
        return self.mapper.map(row, include=include)

    def map_for(self, row_type: Label) -> Schema:
        """Return the field names of ``row_type`` at this filing's version."""
        return self.mappings.for_row(row_type)

    @classmethod
    def schema_for(cls, row_type: Label, version: str | None = None) -> Schema:
        """Return the field names of ``row_type`` at ``version``; no file needed."""
        return resolve(row_type, version or DEFAULT_VERSION)

    def translate(self, fn: Callable[[Translator], Any] | None = None) -> Translator:
        """Return the translator, after passing it to ``fn`` if given.

        Example:
            filing.translate(lambda t: t.alias("amount", "contribution_amount", row="sa"))
        """
        if fn is not None:
            fn(self.translator)
        return self.translator

    # ------------------------------------------------------------------
    # Amendments and comparison
    # ------------------------------------------------------------------
    @property
    def amends(self) -> str | None:
        """Id of the filing this one amends (the header's report id), or None."""
        header = self.header()
        return header.get("report_id") if header is not None else None

    @property
    def is_amendment(self) -> bool:
        return self.amends is not None

    def hash_zip(self, keys: Sequence[str | None], values: Sequence[Any]) -> Record:
        """Pair ``keys`` with ``values`` into a record typed by the first value."""
        record = Record(values[0] if values else None, self.translator)
        record.update((k, v) for k, v in zip(keys, values) if k is not None)
        return record

    def compare(self, other: Filing | int | str) -> list[str]:
        """Return the summary fields whose values differ from ``other``'s summary.

        ``other`` may be a Filing or a filing id, which is downloaded into this
        filing's directory.
        """
        if not isinstance(other, Filing):
            other = Filing(other, download_dir=self.download_dir).download()
        return list(hash_diff(self.summary() or {}, other.summary() or {}))
