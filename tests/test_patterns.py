from __future__ import annotations

import re

import pytest

from fec_pipeline.schema.patterns import (
    MATCH_ALL,
    ROW_TYPES,
    RowType,
    canonicalize,
    keyword_pattern,
    label_text,
)


@pytest.mark.parametrize(
    ("keyword", "matches", "rejects"),
    [
        ("f2", ["F2", "F2N", "F2A"], ["F24N", "F24"]),
        ("f24", ["F24", "F24N", "F24A"], ["F2N"]),
        ("f3p", ["F3P", "F3PN", "F3PA"], ["F3PS", "F3P31"]),
        ("f3p31", ["F3P31"], ["F3PN"]),
        ("sc", ["SC/10", "SC/12"], ["SC1/10", "SC2/10"]),
        ("f3x", ["F3XN", "F3XA", "F3XT", "F3X"], ["F3N"]),
        ("hdr", ["HDR"], ["HDRX"]),
    ],
)
def test_row_type_patterns_disambiguate_prefixes(
    keyword: str, matches: list[str], rejects: list[str]
) -> None:
    pattern = keyword_pattern(keyword)
    assert pattern is not None
    for value in matches:
        assert pattern.search(value), value
    for value in rejects:
        assert not pattern.search(value), value


def test_row_type_enum_mirrors_keyword_table() -> None:
    assert RowType.SA.value == ROW_TYPES["sa"]
    assert RowType.F3P31.value == r"^f3p31"
    assert len(RowType) == len(ROW_TYPES)


def test_canonicalize_pattern_becomes_case_insensitive() -> None:
    pattern = canonicalize(re.compile(r"^foo"))
    assert pattern.pattern == r"^foo"
    assert pattern.search("FoObar")


def test_canonicalize_row_type_member_uses_keyword_pattern() -> None:
    assert canonicalize(RowType.F2).pattern == ROW_TYPES["f2"]


def test_canonicalize_exact_keyword_uses_table() -> None:
    assert canonicalize("sc1", exact=True).pattern == ROW_TYPES["sc1"]


def test_canonicalize_exact_unknown_token_is_anchored() -> None:
    pattern = canonicalize("contribution_date", exact=True)
    assert pattern.search("CONTRIBUTION_DATE")
    assert not pattern.search("contribution_date_2")
    assert not pattern.search("x_contribution_date")


def test_canonicalize_free_text_is_escaped_substring() -> None:
    pattern = canonicalize("5.0")
    assert pattern.search("v5.00")
    assert not pattern.search("5a0")
    assert canonicalize("sa").search("SA11AI")


def test_match_all_matches_anything() -> None:
    assert MATCH_ALL.search("")
    assert MATCH_ALL.search("anything")


def test_label_text() -> None:
    assert label_text(re.compile("^sa")) == "^sa"
    assert label_text(RowType.SB) == "SB"
    assert label_text("SA11AI") == "SA11AI"
