"""Human-readable card information formatting."""

from __future__ import annotations

from icsim.app.cardinfo import SessionInfo
from icsim.core.mynumber.records import CERTIFICATE_DATA, PIN, MyNumberRecord
from icsim.core.reader.types import CardRecord

_DATE = "%Y/%m/%d"

# Never shown in property listings.
_HIDDEN = {PIN, CERTIFICATE_DATA}


def _result(value: bool | None) -> str:
    if value is None:
        return "-"
    return "success" if value else "failure"


def format_card(card: CardRecord) -> str:
    """Format a card record: identity, validity, properties."""
    lines = [
        f"  ID:          {card.card_id}",
        f"  Type:        {card.card_type}",
        f"  Issued:      {card.issue_date.strftime(_DATE)}",
        f"  Expires:     {card.expiry_date.strftime(_DATE)}"
        + ("" if card.is_valid() else " (expired)"),
        "  Properties:",
    ]
    for key, value in card.properties.items():
        if key in _HIDDEN:
            value = "***" if key == PIN else f"<{len(value)} chars>"
        lines.append(f"    {key}: {value}")
    return "\n".join(lines)


def format_mynumber(record: MyNumberRecord) -> str:
    return "\n".join([
        f"  Name:        {record.name}",
        f"  MyNumber:    {record.my_number}",
        f"  Address:     {record.address}",
        f"  Birth date:  {record.birth_date}",
        f"  Issued:      {record.issue_date.strftime(_DATE)}",
        f"  Expires:     {record.expiry_date.strftime(_DATE)}",
    ])


def format_session_info(info: SessionInfo) -> str:
    """Format everything the runner has collected so far."""
    sections = []
    if info.card is not None:
        sections.append("--- Card ---\n" + format_card(info.card))
    sections.append(
        "--- Checks ---\n"
        f"  Authenticate: {_result(info.authenticated)}\n"
        f"  PIN verify:   {_result(info.pin_verified)}"
    )
    if info.mynumber is not None:
        sections.append("--- MyNumber ---\n" + format_mynumber(info.mynumber))
    if info.certificate:
        subject = info.certificate_subject or "(not X.509)"
        sections.append(
            "--- Certificate ---\n"
            f"  Length:      {len(info.certificate)} bytes\n"
            f"  Subject:     {subject}"
        )
    return "\n".join(sections)
