from __future__ import annotations

import pytest

from fec_pipeline.errors import SchemaNotFound
from fec_pipeline.schema import mappings as mappings_mod
from fec_pipeline.schema.mappings import (
    SCHEMA_TABLE,
    Mappings,
    build_schema_table,
    key_by_pattern,
    resolve,
)
from fec_pipeline.schema.patterns import ROW_TYPES, RowType


def test_resolve_sa_v8_fields() -> None:
    schema = resolve("SA11AI", "8.0")
    assert schema[:3] == ("form_type", "filer_committee_id_number", "transaction_id")
    assert schema[7:12] == (
        "contributor_last_name",
        "contributor_first_name",
        "contributor_middle_name",
        "contributor_prefix",
        "contributor_suffix",
    )
    assert schema[19] == "contribution_date"


def test_resolve_legacy_sa_uses_composite_name() -> None:
    schema = resolve("SA17", "5.00")
    assert schema[3] == "contributor_name"
    assert "contributor_first_name" not in schema


def test_resolve_v3_sa_has_its_own_layout() -> None:
    assert resolve("SA11A1", "3")[2] == "contributor_name"


def test_longest_row_key_wins() -> None:
    assert resolve("F91", "8.0")[2] == "controller_last_name"
    assert resolve("F9", "8.0")[2] == "entity_type"
    assert resolve("SC1/10", "8.0") == SCHEMA_TABLE["^sc1"]["^8.0|^7.0|^6.4|^6.3|^6.2|^6.1"]


def test_f2_is_not_confused_with_f24() -> None:
    assert resolve("F24N", "8.0") == SCHEMA_TABLE["(^f24$)|(^f24[an])"]["^8.0"]
    assert resolve("F2N", "8.0") == SCHEMA_TABLE["(^f2$)|(^f2[^4])"]["^8.0|^7.0|^6.4|^6.3|^6.2|^6.1"]


def test_row_type_member_and_case_are_accepted() -> None:
    assert resolve(RowType.SB, "8.0") == resolve("sb23", "8.0") == resolve("SB23", "8.0")


def test_every_row_type_has_its_own_schema_entry() -> None:
    assert set(ROW_TYPES.values()) <= set(SCHEMA_TABLE)


@pytest.mark.parametrize(
    ("row_type", "key"),
    [
        ("SA3L", "^sa3l"),
        ("F99", "^f99"),
        ("H1", "^h1"),
        ("H4", "^h4"),
        ("H6", "^h6"),
        ("SL1A", "^sl"),
        ("F6", "(^f6$)|(^f6[an])"),
        ("F65", "^f65"),
        ("F7N", "^f7[na]"),
        ("F76", "^f76"),
        ("F13N", "^f13[an]"),
        ("F132", "^f132"),
        ("F133", "^f133"),
        ("F1S", "^f1s"),
        ("F3Z1", "^f3z"),
    ],
)
def test_less_common_rows_get_their_own_layout(row_type: str, key: str) -> None:
    assert key_by_pattern(SCHEMA_TABLE, row_type) == key
    assert resolve(row_type, "8.0")[0] == "form_type"


def test_sa3l_is_not_read_with_the_sa_layout() -> None:
    assert resolve("SA3L", "8.0") != resolve("SA11AI", "8.0")
    assert "bundled_amount_period" in resolve("SA3L", "8.0")
    assert resolve("F99", "8.0")[-1] == "text"


@pytest.mark.parametrize("member", list(RowType), ids=lambda member: member.name)
def test_row_type_members_resolve_to_their_own_entry(member: RowType) -> None:
    versions = SCHEMA_TABLE[member.value]
    assert key_by_pattern(SCHEMA_TABLE, member) == member.value
    assert resolve(member, "8.0") == versions[key_by_pattern(versions, "8.0")]


def test_equal_length_keys_keep_table_order() -> None:
    table = build_schema_table({
        "^ab": {"^1": ["first"]},
        "^a.": {"^1": ["second"]},
    })
    assert key_by_pattern(table, "abc") == "^ab"
    assert resolve("abc", "1", table) == ("first",)


def test_version_specific_layouts() -> None:
    assert resolve("F3XN", "8.0")[15] == "qualified_committee"
    assert resolve("SE", "8.0")[21] == "calendar_y_t_d_per_election_office"
    assert resolve("SE", "8.0")[19] == "dissemination_date"
    assert resolve("SE", "7.0")[19] == "expenditure_date"
    assert resolve("HDR", "5.00")[5] == "name_delim"
    assert resolve("HDR", "8.0")[5] == "report_id"


def test_unknown_row_type_raises() -> None:
    with pytest.raises(SchemaNotFound) as excinfo:
        resolve("ZZ99", "8.0")
    assert excinfo.value.label == "ZZ99"
    assert "^sa" in excinfo.value.known_keys


def test_unknown_version_raises() -> None:
    with pytest.raises(SchemaNotFound):
        resolve("SA11AI", "9.9")


def test_schema_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        SCHEMA_TABLE["^sa"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        SCHEMA_TABLE["^sa"]["^3"] = ()  # type: ignore[index]
    assert isinstance(SCHEMA_TABLE["^sa"]["^3"], tuple)


def test_mappings_caches_per_row_type(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    real_resolve = mappings_mod.resolve

    def counting_resolve(row_type, version, table):
        calls.append(str(row_type))
        return real_resolve(row_type, version, table)

    monkeypatch.setattr(mappings_mod, "resolve", counting_resolve)
    m = Mappings("8.0")
    first = m.for_row("SA11AI")
    assert m.for_row("SA11AI") is first
    m.for_row("SB23")
    assert calls == ["SA11AI", "SB23"]
