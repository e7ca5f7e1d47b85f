from icsim.core.mynumber.card import MyNumberCard, parse_certificate
from icsim.core.mynumber.messages import (
    CertificateResult,
    GetCertificateMessage,
    MyNumberResult,
    ReadMyNumberMessage,
    VerifyPinMessage,
    VerifyPinResult,
)
from icsim.core.mynumber.records import MyNumberRecord
from icsim.core.mynumber.terminal import MyNumberTerminal

__all__ = [
    "CertificateResult",
    "GetCertificateMessage",
    "MyNumberCard",
    "MyNumberRecord",
    "MyNumberResult",
    "MyNumberTerminal",
    "ReadMyNumberMessage",
    "VerifyPinMessage",
    "VerifyPinResult",
    "parse_certificate",
]
