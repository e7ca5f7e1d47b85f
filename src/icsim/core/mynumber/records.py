"""MyNumber card record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from icsim.core.reader.types import CardRecord

# Property names on a MyNumber CardRecord.
NAME = "Name"
MY_NUMBER = "MyNumber"
ADDRESS = "Address"
BIRTH_DATE = "BirthDate"
CERTIFICATE_DATA = "CertificateData"
PIN = "PIN"


@dataclass(frozen=True)
class MyNumberRecord:
    """Identity fields extracted from a MyNumber card."""

    card_id: str
    name: str
    my_number: str
    address: str
    birth_date: str
    certificate_data: str
    issue_date: date
    expiry_date: date

    @classmethod
    def from_card(cls, card: CardRecord) -> MyNumberRecord:
        props = card.properties
        return cls(
            card_id=card.card_id,
            name=props.get(NAME, ""),
            my_number=props.get(MY_NUMBER, ""),
            address=props.get(ADDRESS, ""),
            birth_date=props.get(BIRTH_DATE, ""),
            certificate_data=props.get(CERTIFICATE_DATA, ""),
            issue_date=card.issue_date,
            expiry_date=card.expiry_date,
        )
