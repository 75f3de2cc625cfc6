"""Command-line interface for reading FEC filings.

Provides subcommands: `download`, `header`, `summary`, `rows`, `compare`,
`load`, `committee` and `search`. Each command is implemented as a `cmd_*`
function that accepts an argparse namespace; query results are printed to
stdout as JSON lines.
"""
from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from fec_pipeline.compare import Comparison
from fec_pipeline.config import get_settings
from fec_pipeline.db import get_client, get_db
from fec_pipeline.filing import Filing
from fec_pipeline.ingest.committee import Committee
from fec_pipeline.ingest.search import Search
from fec_pipeline.load.frames import rows_to_pandas
from fec_pipeline.load.load_rows import load_rows_to_mongo
from fec_pipeline.logging_config import configure_logging

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _filing(args: argparse.Namespace, filing_id: str | None = None) -> Filing:
    """Return a downloaded Filing for `filing_id` (defaults to `args.filing_id`)."""
    filing = Filing(
        filing_id or args.filing_id,
        download_dir=args.download_dir,
        translate=args.translate,
    )
    return filing.download()


def _emit(value: Any) -> None:
    print(json.dumps(value, default=str))


def _split_fields(raw: str | None) -> list[str] | None:
    if not raw:
        return None
    return [name.strip() for name in raw.split(",") if name.strip()]


# --------------------------------------------------
# FILINGS
# --------------------------------------------------
def cmd_download(args: argparse.Namespace) -> None:
    """Download one or more filings into the download directory."""
    for filing_id in args.filing_ids:
        filing = Filing(filing_id, download_dir=args.download_dir).download(force=args.force)
        log.info("Filing %s ready at %s", filing_id, filing.file_path)


def cmd_header(args: argparse.Namespace) -> None:
    _emit(_filing(args).header(include=_split_fields(args.include)))


def cmd_summary(args: argparse.Namespace) -> None:
    _emit(_filing(args).summary(include=_split_fields(args.include)))


def cmd_rows(args: argparse.Namespace) -> None:
    """Print (or export to CSV) the rows of a filing matching a row type.

    Args:
        args: argparse namespace with `filing_id`, `row_type`, `include`, `csv`.
    """
    filing = _filing(args)
    include = _split_fields(args.include)

    if args.csv:
        pdf = rows_to_pandas(filing, args.row_type, include=include)
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        pdf.to_csv(args.csv, index=False)
        log.info("Wrote %d rows to %s", len(pdf), args.csv)
        return

    filing.rows_like(args.row_type, include=include, callback=_emit)


def cmd_compare(args: argparse.Namespace) -> None:
    """Print the summary fields (or schedule rows) that changed between two filings."""
    comparison = Comparison(_filing(args, args.filing_1), _filing(args, args.filing_2))
    if args.schedule:
        for row in comparison.schedule(args.schedule):
            _emit(row)
    else:
        _emit(comparison.summary())


# --------------------------------------------------
# LOAD
# --------------------------------------------------
def cmd_load(args: argparse.Namespace) -> None:
    """Upsert the matching rows of a filing into MongoDB."""
    s = get_settings()
    client = get_client(s.mongo_uri)
    db = get_db(client, s.mongo_db)
    try:
        load_rows_to_mongo(_filing(args), args.row_type, db[args.collection])
    finally:
        client.close()


# --------------------------------------------------
# DISCOVERY
# --------------------------------------------------
def cmd_committee(args: argparse.Namespace) -> None:
    for filing_id in Committee(args.committee_id).filing_ids():
        print(filing_id)


def cmd_search(args: argparse.Namespace) -> None:
    params = {
        "committee_id": args.committee_id,
        "committee_name": args.committee_name,
        "state": args.state,
        "party": args.party,
        "committee_type": args.committee_type,
        "report_type": args.report_type,
        "date": args.date,
        "form_type": args.form_type,
    }
    search = Search(**{k: v for k, v in params.items() if v is not None})
    search.results(callback=lambda result: _emit(result.model_dump(mode="json")))


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="fec-pipeline")
    p.add_argument("--log-level", default="INFO")
    p.add_argument("--log-file", type=Path, default=None)
    p.add_argument("--download-dir", type=Path, default=None)
    p.add_argument(
        "--translate",
        action="append",
        default=[],
        choices=["names", "dates"],
        help="Enable a bundled translation pack (repeatable).",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_download = sub.add_parser("download")
    p_download.add_argument("filing_ids", nargs="+")
    p_download.add_argument("--force", action="store_true")

    for name in ("header", "summary"):
        p_row = sub.add_parser(name)
        p_row.add_argument("filing_id")
        p_row.add_argument("--include", default=None, help="Comma separated field names.")

    p_rows = sub.add_parser("rows")
    p_rows.add_argument("filing_id")
    p_rows.add_argument("row_type")
    p_rows.add_argument("--include", default=None, help="Comma separated field names.")
    p_rows.add_argument("--csv", type=Path, default=None)

    p_compare = sub.add_parser("compare")
    p_compare.add_argument("filing_1")
    p_compare.add_argument("filing_2")
    p_compare.add_argument("--schedule", default=None, help="Compare rows of this type instead of summaries.")

    p_load = sub.add_parser("load")
    p_load.add_argument("filing_id")
    p_load.add_argument("row_type")
    p_load.add_argument("--collection", default="filing_rows")

    p_committee = sub.add_parser("committee")
    p_committee.add_argument("committee_id")

    p_search = sub.add_parser("search")
    p_search.add_argument("--committee-id", default=None)
    p_search.add_argument("--committee-name", default=None)
    p_search.add_argument("--state", default=None)
    p_search.add_argument("--party", default=None)
    p_search.add_argument("--committee-type", default=None)
    p_search.add_argument("--report-type", default=None)
    p_search.add_argument("--date", type=date.fromisoformat, default=None)
    p_search.add_argument("--form-type", default=None)

    return p


COMMANDS = {
    "download": cmd_download,
    "header": cmd_header,
    "summary": cmd_summary,
    "rows": cmd_rows,
    "compare": cmd_compare,
    "load": cmd_load,
    "committee": cmd_committee,
    "search": cmd_search,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    command = COMMANDS.get(args.cmd)
    if command is None:
        raise SystemExit(2)
    command(args)


if __name__ == "__main__":
    main()
