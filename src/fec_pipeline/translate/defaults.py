"""Bundled translation packs.

Each pack is a function that registers rules on a `Translator`. Packs are
enabled by name, either through ``Translator(include=[...])`` or through the
``FEC_TRANSLATIONS`` setting:

- ``names``: v6 and later filings carry person names in five component
  fields while v3-v5 filings carry one composite ``<field>_name`` value. The
  pack fills in whichever form is missing so both versions expose both.
- ``dates``: turns date fields into `datetime.date` values.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from typing import Any

from fec_pipeline.schema.patterns import Label, RowType
from fec_pipeline.translate.names import NAME_BITS, parse_name
from fec_pipeline.translate.translator import Translator

log = logging.getLogger(__name__)

DATE_FORMATS = ("%Y%m%d", "%Y-%m-%d", "%m/%d/%Y")

# (row type, version selector, name fields) whose components are joined into <field>_name
COMPOSITES: list[tuple[RowType, str, tuple[str, ...]]] = [
    (RowType.SA, r"^[6-8]", ("contributor", "donor_candidate")),
    (RowType.SB, r"^[6-8]", ("payee", "beneficiary_candidate")),
    (RowType.SC, r"^[6-8]", ("lender", "lender_candidate")),
    (RowType.SC1, r"^[6-8]", ("treasurer", "authorized")),
    (RowType.SC2, r"^[6-8]", ("guarantor",)),
    (RowType.SD, r"^[6-8]", ("creditor",)),
    (RowType.SE, r"^[6-8]", ("payee", "candidate")),
    (RowType.SF, r"^[6-8]", ("payee", "payee_candidate")),
    (RowType.F3P, r"^[6-8]", ("treasurer",)),
    (RowType.F3P31, r"^[6-8]", ("contributor",)),
]

# (row type, version selector, name fields) whose <field>_name is split into components
COMPONENTS: list[tuple[RowType, str, tuple[str, ...]]] = [
    (RowType.SA, r"^3|(5.0)", ("contributor",)),
    (RowType.SA, r"^[3-5]", ("donor_candidate",)),
    (RowType.SB, r"^3|(5.0)", ("payee",)),
    (RowType.SB, r"^[3-5]", ("beneficiary_candidate",)),
    (RowType.SC, r"^[3-5]", ("lender", "lender_candidate")),
    (RowType.SC1, r"^[3-5]", ("treasurer", "authorized")),
    (RowType.SC2, r"^[3-5]", ("guarantor",)),
    (RowType.SD, r"^[3-5]", ("creditor",)),
    (RowType.SE, r"^[3-5]", ("payee", "candidate")),
    (RowType.SF, r"^[3-5]", ("payee", "payee_candidate")),
    (RowType.F3P, r"^[3-5]", ("treasurer",)),
    (RowType.F3P31, r"^[3-5]", ("contributor",)),
]


def _join_name(field: str) -> Callable[[Mapping[str, Any]], str]:
    def combine(row: Mapping[str, Any]) -> str:
        bits = (row.get(f"{field}_{bit}") for bit in NAME_BITS)
        return " ".join(bit for bit in bits if bit is not None)
    return combine


def _name_component(field: str, bit: str) -> Callable[[Mapping[str, Any]], str | None]:
    def combine(row: Mapping[str, Any]) -> str | None:
        name = row.get(f"{field}_name")
        if name is None:
            return None
        return parse_name(name)[bit].strip()
    return combine


def combine_components_into_name(
    translator: Translator, row: Label, version: str, fields: str | Iterable[str]
) -> None:
    """Register combine rules that build ``<field>_name`` from its components."""
    for field in [fields] if isinstance(fields, str) else fields:
        translator.combine(
            _join_name(field), row=row, version=re.compile(version), field=f"{field}_name"
        )


def split_name_into_components(
    translator: Translator, row: Label, version: str, fields: str | Iterable[str]
) -> None:
    """Register combine rules that split ``<field>_name`` into its five components."""
    for field in [fields] if isinstance(fields, str) else fields:
        for bit in NAME_BITS:
            translator.combine(
                _name_component(field, bit),
                row=row,
                version=re.compile(version),
                field=f"{field}_{bit}",
            )


def names(translator: Translator) -> None:
    for row, version, fields in COMPOSITES:
        combine_components_into_name(translator, row, version, fields)
    for row, version, fields in COMPONENTS:
        split_name_into_components(translator, row, version, fields)


def parse_date(value: Any) -> Any:
    """Return ``value`` as a date when it looks like one, otherwise unchanged."""
    if value is None or isinstance(value, date):
        return value
    text = str(value).strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return value


def dates(translator: Translator) -> None:
    # Only date* / *_date* fields; plenty of other values are 8 digits long.
    translator.convert(parse_date, field=re.compile(r"(^|_)date"))


DEFAULT_PACKS: dict[str, Callable[[Translator], None]] = {
    "names": names,
    "dates": dates,
}


def add_default_translations(translator: Translator, packs: Iterable[str] | str) -> None:
    """Register the named packs on ``translator``.

    Raises:
        ValueError: if a pack name is unknown.
    """
    for pack in [packs] if isinstance(packs, str) else packs:
        register = DEFAULT_PACKS.get(str(pack).lower())
        if register is None:
            raise ValueError(
                f"Unknown translation pack {pack!r}; available: {', '.join(DEFAULT_PACKS)}"
            )
        log.debug("Registering %s translations", pack)
        register(translator)
