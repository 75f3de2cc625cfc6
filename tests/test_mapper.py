from __future__ import annotations

from decimal import Decimal

import pytest

from fec_pipeline.errors import MissingTranslationTarget, SchemaNotFound
from fec_pipeline.mapper import RecordMapper, field_positions
from fec_pipeline.schema.mappings import Mappings, build_schema_table
from fec_pipeline.translate.record import Record
from fec_pipeline.translate.translator import Translator

TABLE = build_schema_table({
    "^zz": {
        "^1": ["form_type", "amount", "first", "last", None, "amount", "date"],
    },
})


def make_mapper(translator: Translator | None = None) -> RecordMapper:
    return RecordMapper(Mappings("1.0", TABLE), translator or Translator())


def test_field_positions_keep_first_occurrence() -> None:
    assert field_positions(TABLE["^zz"]["^1"]) == {
        "form_type": 0,
        "amount": 1,
        "first": 2,
        "last": 3,
        "date": 6,
    }


def test_map_labels_every_named_field() -> None:
    record = make_mapper().map(["ZZ1", "10", "Ann", "Lee", "skip", "99", "20110322"])
    assert isinstance(record, Record)
    assert record.row_type == "ZZ1"
    assert dict(record) == {
        "form_type": "ZZ1",
        "amount": "10",
        "first": "Ann",
        "last": "Lee",
        "date": "20110322",
    }


def test_short_rows_fill_with_none() -> None:
    record = make_mapper().map(["ZZ1", "10"])
    assert record["first"] is None
    assert record["date"] is None
    assert len(record) == 5


def test_include_keeps_schema_order() -> None:
    record = make_mapper().map(["ZZ1", "10", "Ann", "Lee"], include=["last", "form_type", "nope"])
    assert list(record) == ["form_type", "last"]


def test_explicit_row_type_overrides_first_value() -> None:
    record = make_mapper().map(["", "10"], row_type="ZZ9")
    assert record.row_type == "ZZ9"


def test_unknown_row_type_raises() -> None:
    with pytest.raises(SchemaNotFound):
        make_mapper().map(["SA11AI", "10"])


def test_convert_rules_fold_in_registration_order() -> None:
    t = Translator()
    t.convert(lambda v: Decimal(v), field="amount")
    t.convert(lambda v: v * 2, field="amount")
    t.convert(lambda v: v + 1, field="amount", row="other")
    record = make_mapper(t).map(["ZZ1", "10"])
    assert record["amount"] == Decimal("20")


def test_combine_sees_converted_values_regardless_of_order() -> None:
    t = Translator()
    t.combine(lambda row: f"{row['first']} {row['last']}", field="full_name")
    t.convert(str.upper, field="last")
    record = make_mapper(t).map(["ZZ1", "10", "Ann", "Lee"])
    assert record["full_name"] == "Ann LEE"
    assert record["last"] == "LEE"


def test_combine_rules_do_not_see_each_other() -> None:
    t = Translator()
    t.combine(lambda row: "x", field="one")
    t.combine(lambda row: row.get("one"), field="two")
    record = make_mapper(t).map(["ZZ1"])
    assert record["one"] == "x"
    assert record["two"] is None


def test_combine_reads_aliases() -> None:
    t = Translator()
    t.alias("surname", "last")
    t.combine(lambda row: row["surname"].lower(), field="slug")
    assert make_mapper(t).map(["ZZ1", "10", "Ann", "Lee"])["slug"] == "lee"


def test_combine_missing_field_raises() -> None:
    t = Translator()
    t.combine(lambda row: row["contributor_name"], field="name")
    with pytest.raises(MissingTranslationTarget):
        make_mapper(t).map(["ZZ1"])
