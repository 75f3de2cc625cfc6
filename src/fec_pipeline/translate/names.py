"""Person names as found in filings.

Names arrive either in reading order (``"Mr. John Charles Smith Sr."``), in
filing order (``"SMITH, MR. JOHN CHARLES"``) or caret-delimited from older
software (``"Smith^John^Mr.^Sr."``). `parse_name` hands the first two to
nameparser's `HumanName` after repairing the third.
"""

from __future__ import annotations

from nameparser import HumanName

NAME_BITS = ("prefix", "first_name", "middle_name", "last_name", "suffix")


def fix_caret_names(name: str) -> str:
    """Turn ``"Allred^Ann^Mrs.^III"`` into ``"Mrs. Ann Allred III"``."""
    parts = name.split("^")[::-1]
    if len(parts) > 3:
        # the suffix leads after reversing; move it to the end
        parts.append(parts.pop(0))
    return " ".join(part for part in parts if part)


def parse_name(name: str) -> dict[str, str]:
    """Split a person's name into prefix, first, middle, last and suffix.

    Components that are not present come back as empty strings.

    Args:
        name: Name in reading order, ``Last, First`` order or caret-delimited.

    Returns:
        Mapping keyed by `NAME_BITS`.
    """
    if "^" in name:
        name = fix_caret_names(name)
    parsed = HumanName(" ".join(name.split()))
    return dict(
        zip(NAME_BITS, (parsed.title, parsed.first, parsed.middle, parsed.last, parsed.suffix))
    )
