"""Row-type keywords and label → pattern canonicalization.

Every row type that appears in a filing is identified by the first value of
the row (`SA11AI`, `F3XN`, `HDR`, ...). `ROW_TYPES` maps a short keyword for
each known row type to a pattern that matches that type in the wild and
nothing else; several families are prefixes of one another (`F2` / `F24`,
`F3P` / `F3PS` / `F3P31`), so the patterns are hand-tuned to disambiguate.

The pattern strings double as the row keys of the schema table, so they must
stay byte-for-byte stable.
"""

from __future__ import annotations

import re
from enum import Enum

ROW_TYPES: dict[str, str] = {
    "hdr": r"^hdr$",
    "f1": r"^f1[an]",
    "f13": r"^f13[an]",
    "f132": r"^f132",
    "f133": r"^f133",
    "f1m": r"(^f1m[a|n])",
    "f1s": r"^f1s",
    "f2": r"(^f2$)|(^f2[^4])",
    "f24": r"(^f24$)|(^f24[an])",
    "f3": r"^f3[a|n|t]",
    "f3l": r"^f3l[a|n]",
    "f3p": r"(^f3p$)|(^f3p[^s|3])",
    "f3s": r"^f3s",
    "f3p31": r"^f3p31",
    "f3ps": r"^f3ps",
    "f3x": r"(^f3x$)|(^f3x[ant])",
    "f3z": r"^f3z",
    "f4": r"^f4[na]",
    "f5": r"^f5[na]",
    "f56": r"^f56",
    "f57": r"^f57",
    "f6": r"(^f6$)|(^f6[an])",
    "f65": r"^f65",
    "f7": r"^f7[na]",
    "f76": r"^f76",
    "f9": r"^f9",
    "f91": r"^f91",
    "f92": r"^f92",
    "f93": r"^f93",
    "f94": r"^f94",
    "f99": r"^f99",
    "h1": r"^h1",
    "h2": r"^h2",
    "h3": r"^h3",
    "h4": r"^h4",
    "h5": r"^h5",
    "h6": r"^h6",
    "sa": r"^sa",
    "sa3l": r"^sa3l",
    "sb": r"^sb",
    "sc": r"^sc[^1-2]",
    "sc1": r"^sc1",
    "sc2": r"^sc2",
    "sd": r"^sd",
    "se": r"^se",
    "sf": r"^sf",
    "sl": r"^sl",
    "text": r"^text",
}

RowType = Enum("RowType", {key.upper(): value for key, value in ROW_TYPES.items()}, type=str)
RowType.__doc__ = "Known row types; each member's value is its matching pattern."

# Selector that matches anything; used for omitted rule selectors.
MATCH_ALL = re.compile(".*", re.IGNORECASE)

Label = str | re.Pattern[str] | RowType


def keyword_pattern(keyword: str) -> re.Pattern[str] | None:
    """Return the pattern for a known row-type keyword, or None.

    Args:
        keyword: Keyword such as ``"sa"`` or ``"F3P31"`` (case-insensitive).
    """
    source = ROW_TYPES.get(keyword.lower())
    if source is None:
        return None
    return re.compile(source, re.IGNORECASE)


def canonicalize(label: Label, exact: bool = False) -> re.Pattern[str]:
    """Convert a label into a case-insensitive pattern.

    - An existing pattern keeps its source and becomes case-insensitive.
    - A `RowType` member, or a keyword from `ROW_TYPES` when ``exact`` is set,
      becomes the keyword's disambiguating pattern.
    - Any other token with ``exact`` set must match the whole value.
    - Free text matches anywhere, with regex metacharacters escaped.

    Args:
        label: Pattern, RowType member or string to convert.
        exact: Treat a string as a symbolic token rather than free text.

    Returns:
        A compiled, case-insensitive pattern.
    """
    if isinstance(label, re.Pattern):
        return re.compile(label.pattern, label.flags | re.IGNORECASE)
    if isinstance(label, RowType):
        return re.compile(label.value, re.IGNORECASE)
    text = str(label)
    if exact:
        return keyword_pattern(text) or re.compile(f"^{re.escape(text)}$", re.IGNORECASE)
    return re.compile(re.escape(text), re.IGNORECASE)


# Historical name for canonicalize.
regexify = canonicalize


def label_text(label: object) -> str:
    """Return the text a label contributes when it is itself matched against a pattern."""
    if isinstance(label, re.Pattern):
        return label.pattern
    if isinstance(label, RowType):
        return label.name
    return str(label)
