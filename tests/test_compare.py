from __future__ import annotations

from fec_pipeline.compare import Comparison, hash_diff
from fec_pipeline.filing import Filing


def test_hash_diff_reports_changed_and_added_keys() -> None:
    assert hash_diff({"a": 1, "b": 2}, {"a": 1, "b": 3, "c": 4}) == {"b": 3, "c": 4}


def test_hash_diff_reports_dropped_keys_as_none() -> None:
    assert hash_diff({"a": 1, "b": 2}, {"a": 1}) == {"b": None}


def test_hash_diff_of_equal_rows_is_empty() -> None:
    assert hash_diff({"a": None}, {"a": None}) == {}


def test_comparison_summary(write_filing, f3x_summary) -> None:
    write_filing(1, "8.0", [f3x_summary])
    write_filing(2, "8.0", [{**f3x_summary, "col_a_7_total_disbursements": "310.00"}])
    diff = Comparison(Filing(1), Filing(2)).summary()
    assert diff == {"col_a_7_total_disbursements": "310.00"}


def test_comparison_schedule_lists_rows_missing_from_other(write_filing, sa_row) -> None:
    changed = {**sa_row, "transaction_id": "SA11AI.5000", "contribution_amount": "75.00"}
    write_filing(1, "8.0", [sa_row, changed])
    write_filing(2, "8.0", [sa_row])

    rows = Comparison(Filing(1), Filing(2)).schedule("sa")
    assert [row["transaction_id"] for row in rows] == ["SA11AI.5000"]
    assert Comparison(Filing(2), Filing(1)).schedule("sa") == []


def test_comparison_schedule_handles_unhashable_values(write_filing, sa_row) -> None:
    write_filing(1, "8.0", [sa_row])
    write_filing(2, "8.0", [sa_row])
    f1, f2 = Filing(1), Filing(2)
    for filing in (f1, f2):
        filing.translate().combine(lambda row: [row["contribution_amount"]], field="amounts")
    assert Comparison(f1, f2).schedule("sa") == []
