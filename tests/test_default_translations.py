from __future__ import annotations

from datetime import date

import pytest

from fec_pipeline.mapper import RecordMapper
from fec_pipeline.schema.mappings import Mappings, resolve
from fec_pipeline.translate.defaults import parse_date
from fec_pipeline.translate.names import fix_caret_names, parse_name
from fec_pipeline.translate.translator import Translator


def map_row(values: dict, version: str, packs: list[str]) -> dict:
    schema = resolve(values["form_type"], version)
    raw = [values.get(name) if name is not None else None for name in schema]
    return RecordMapper(Mappings(version), Translator(include=packs)).map(raw)


def test_names_joins_components_on_modern_rows(sa_row: dict) -> None:
    record = map_row(sa_row, "8.0", ["names"])
    assert record["contributor_name"] == "Mr. John Charles Smith III"
    assert record["contributor_last_name"] == "Smith"
    assert record["donor_candidate_name"] == ""


def test_names_skips_missing_components(sa_row: dict) -> None:
    sa_row.update(contributor_prefix=None, contributor_middle_name=None, contributor_suffix=None)
    assert map_row(sa_row, "8.0", ["names"])["contributor_name"] == "John Smith"


def test_names_splits_legacy_composite() -> None:
    row = {
        "form_type": "SA11AI",
        "filer_committee_id_number": "C00431171",
        "contributor_name": "Mr. Steve Aaker",
        "contribution_amount": "100.00",
    }
    record = map_row(row, "5.00", ["names"])
    assert record["contributor_name"] == "Mr. Steve Aaker"
    assert record["contributor_prefix"] == "Mr."
    assert record["contributor_first_name"] == "Steve"
    assert record["contributor_middle_name"] == ""
    assert record["contributor_last_name"] == "Aaker"
    assert record["contributor_suffix"] == ""
    assert record["donor_candidate_first_name"] is None


def test_names_splits_legacy_payee_in_filing_order() -> None:
    row = {"form_type": "SB21B", "payee_name": "SMITH, MR. JOHN A", "expenditure_amount": "5"}
    record = map_row(row, "3", ["names"])
    assert record["payee_prefix"] == "MR."
    assert record["payee_first_name"] == "JOHN"
    assert record["payee_middle_name"] == "A"
    assert record["payee_last_name"] == "SMITH"


def test_dates_converts_date_fields_only(sa_row: dict) -> None:
    record = map_row(sa_row, "8.0", ["dates"])
    assert record["contribution_date"] == date(2011, 3, 22)
    assert record["contributor_zip_code"] == "298608420"
    assert record["contribution_amount"] == "250.00"


def test_dates_leaves_missing_and_unparseable_values() -> None:
    assert parse_date(None) is None
    assert parse_date("2011-03-22") == date(2011, 3, 22)
    assert parse_date("03/22/2011") == date(2011, 3, 22)
    assert parse_date("sometime") == "sometime"
    assert parse_date(date(2020, 1, 1)) == date(2020, 1, 1)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Mr. John Charles Smith Sr.", ("Mr.", "John", "Charles", "Smith", "Sr.")),
        ("SMITH, MR. JOHN CHARLES", ("MR.", "JOHN", "CHARLES", "SMITH", "")),
        ("Smith^John^Mr.^Sr.", ("Mr.", "John", "", "Smith", "Sr.")),
        ("John Smith, Jr.", ("", "John", "", "Smith", "Jr.")),
        ("Ludwig van Beethoven", ("", "Ludwig", "", "van Beethoven", "")),
        ("Cher", ("", "Cher", "", "", "")),
        ("   ", ("", "", "", "", "")),
    ],
)
def test_parse_name(name: str, expected: tuple[str, ...]) -> None:
    bits = parse_name(name)
    assert (
        bits["prefix"],
        bits["first_name"],
        bits["middle_name"],
        bits["last_name"],
        bits["suffix"],
    ) == expected


def test_fix_caret_names() -> None:
    assert fix_caret_names("Allred^Ann^Mrs.^III") == "Mrs. Ann Allred III"
    assert fix_caret_names("Allred^Ann") == "Ann Allred"
