"""MyNumber card messages and results."""

from __future__ import annotations

from dataclasses import dataclass

from cryptography import x509

from icsim.core.base import Message, Result
from icsim.core.mynumber.records import MyNumberRecord


@dataclass
class ReadMyNumberMessage(Message):
    """Extract the identity record from the inserted MyNumber card."""


@dataclass
class MyNumberResult(Result):
    record: MyNumberRecord


@dataclass
class VerifyPinMessage(Message):
    """Verify a PIN against the PIN stored on the MyNumber card."""

    pin: str


@dataclass
class VerifyPinResult(Result):
    verified: bool


@dataclass
class GetCertificateMessage(Message):
    """Fetch the certificate stored on the MyNumber card."""


@dataclass
class CertificateResult(Result):
    """Raw certificate bytes, and the parsed certificate when they are DER X.509."""

    data: bytes
    certificate: x509.Certificate | None = None
