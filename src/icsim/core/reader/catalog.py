"""Card catalog: the fixed set of cards available for insertion."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from datetime import date
from pathlib import Path

from icsim.core.reader.types import CardRecord, CardType

lg = logging.getLogger(__name__)

# Self-signed P-256 certificate, CN=YAMADA TARO, serial 0x1234 (DER, base64).
DEMO_CERTIFICATE = (
    "MIIB6TCCAY+gAwIBAgICEjQwCgYIKoZIzj0EAwIwUzELMAkGA1UEBhMCSlAxDTALBgNVBAoM"
    "BEpQS0kxHzAdBgNVBAsMFlZpcnR1YWwgSUMgQ2FyZCBSZWFkZXIxFDASBgNVBAMMC1lBTUFE"
    "QSBUQVJPMB4XDTI2MTAxOTEwMDAzNVoXDTQ2MTAxNDEwMDAzNVowUzELMAkGA1UEBhMCSlAx"
    "DTALBgNVBAoMBEpQS0kxHzAdBgNVBAsMFlZpcnR1YWwgSUMgQ2FyZCBSZWFkZXIxFDASBgNV"
    "BAMMC1lBTUFEQSBUQVJPMFkwEwYHKoZIzj0CAQYIKoZIzj0DAQcDQgAEe4N1EM0dHLqDO4uR"
    "igOzdB0VdTQ+CmU9RWer+prBxNlwwhaqVVJA9As8A8GTVwsj24kJRutM+b3x1JhSs1Ouv6NT"
    "MFEwHQYDVR0OBBYEFEfUxXrMku2gdcCat7s8d5/kidnbMB8GA1UdIwQYMBaAFEfUxXrMku2g"
    "dcCat7s8d5/kidnbMA8GA1UdEwEB/wQFMAMBAf8wCgYIKoZIzj0EAwIDSAAwRQIhAOkJ6EDt"
    "ZvX1XrhflH09yEhnotLzhAr0bxEoqSNitZU/AiAe5biTBWsE8seAww9bf79/yagPUs3yhJcF"
    "4eiAXRY5uA=="
)


class CatalogError(ValueError):
    """Malformed catalog input."""


def _shift_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return day.replace(year=day.year + years, day=28)


class Catalog(Mapping[str, CardRecord]):
    """Read-only mapping of card identifier to CardRecord.

    Records are copied on construction, so writes made through a session
    never reach the caller's objects. Identifiers are fixed once built.
    """

    def __init__(self, records: Iterable[CardRecord] = ()) -> None:
        self._cards: dict[str, CardRecord] = {}
        for record in records:
            if record.card_id in self._cards:
                raise CatalogError(f"duplicate card id: {record.card_id}")
            self._cards[record.card_id] = record.snapshot()

    @classmethod
    def coerce(cls, source: Catalog | Mapping[str, CardRecord] | Iterable[CardRecord]) -> Catalog:
        """Build a Catalog from a Catalog, a mapping, or an iterable of records."""
        if isinstance(source, Mapping):
            for key, record in source.items():
                if key != record.card_id:
                    raise CatalogError(f"key '{key}' does not match card id '{record.card_id}'")
            return cls(source.values())
        return cls(source)

    @classmethod
    def from_dict(cls, document: dict) -> Catalog:
        """Build a catalog from ``{"cards": [...]}``."""
        try:
            entries = document["cards"]
        except (KeyError, TypeError) as exc:
            raise CatalogError("catalog document needs a 'cards' list") from exc
        if not isinstance(entries, list):
            raise CatalogError("'cards' must be a list")
        return cls(_parse_record(entry) for entry in entries)

    @classmethod
    def from_file(cls, path: str | Path) -> Catalog:
        """Load a JSON catalog file."""
        with open(path, encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as exc:
                raise CatalogError(f"{path}: {exc}") from exc
        catalog = cls.from_dict(document)
        lg.debug("loaded %d cards from %s", len(catalog), path)
        return catalog

    def __getitem__(self, card_id: str) -> CardRecord:
        return self._cards[card_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Catalog({list(self._cards)})"


def _parse_record(entry: dict) -> CardRecord:
    try:
        card_id = entry["id"]
        card_type = CardType(entry["type"])
        issue = date.fromisoformat(entry["issue_date"])
        expiry = date.fromisoformat(entry["expiry_date"])
        properties = entry.get("properties", {})
    except (KeyError, TypeError, ValueError) as exc:
        raise CatalogError(f"bad card entry {entry!r}: {exc}") from exc
    if not isinstance(card_id, str) or not card_id:
        raise CatalogError(f"bad card id: {card_id!r}")
    if not isinstance(properties, dict):
        raise CatalogError(f"{card_id}: 'properties' must be an object")
    return CardRecord(
        card_id=card_id,
        card_type=card_type,
        issue_date=issue,
        expiry_date=expiry,
        properties={str(k): str(v) for k, v in properties.items()},
    )


def default_catalog(today: date | None = None) -> Catalog:
    """The demo cards: two employee cards and one MyNumber card."""
    today = today or date.today()
    return Catalog([
        CardRecord(
            card_id="CARD001",
            card_type=CardType.FELICA,
            issue_date=_shift_years(today, -2),
            expiry_date=_shift_years(today, 8),
            properties={
                "Name": "山田太郎",
                "Company": "サンプル会社",
                "Department": "IT部門",
                "EmployeeId": "EMP001",
            },
        ),
        CardRecord(
            card_id="CARD002",
            card_type=CardType.MIFARE,
            issue_date=_shift_years(today, -1),
            expiry_date=_shift_years(today, 4),
            properties={
                "Name": "佐藤花子",
                "Company": "テスト株式会社",
                "Department": "営業部",
                "EmployeeId": "EMP002",
            },
        ),
        CardRecord(
            card_id="MYNUMBER001",
            card_type=CardType.MYNUMBER,
            issue_date=_shift_years(today, -2),
            expiry_date=_shift_years(today, 8),
            properties={
                "Name": "山田太郎",
                "MyNumber": "123456789012",
                "Address": "東京都千代田区",
                "BirthDate": "1990/01/01",
                "CertificateData": DEMO_CERTIFICATE,
                "PIN": "1234",
            },
        ),
    ])
