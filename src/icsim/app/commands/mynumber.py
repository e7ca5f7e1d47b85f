"""MyNumber card commands."""

from __future__ import annotations

import logging

from icsim.app.display import format_mynumber
from icsim.core.mynumber import (
    GetCertificateMessage,
    ReadMyNumberMessage,
    VerifyPinMessage,
)

lg = logging.getLogger(__name__)

# PINs stay strings.
_raw_commands: set[str] = {"verify_pin"}


def cmd_mynumber(runner) -> bool:
    """Read the MyNumber identity record."""
    result = runner.send(ReadMyNumberMessage())
    runner.info.mynumber = result.record
    lg.info("MyNumber card:\n%s", format_mynumber(result.record))
    return True


def cmd_verify_pin(runner, *, pin: str) -> bool:
    """Verify the MyNumber card PIN (pin=PIN)."""
    result = runner.send(VerifyPinMessage(pin=pin))
    runner.info.pin_verified = result.verified
    if not result.verified:
        lg.error("PIN verification failed")
        return False
    lg.info("PIN verified")
    return True


def cmd_cert(runner) -> bool:
    """Fetch the certificate stored on the MyNumber card."""
    result = runner.send(GetCertificateMessage())
    runner.info.certificate = result.data
    if result.certificate is not None:
        runner.info.certificate_subject = result.certificate.subject.rfc4514_string()
        lg.info("certificate: %d bytes, subject %s",
                len(result.data), runner.info.certificate_subject)
    else:
        runner.info.certificate_subject = ""
        lg.info("certificate data: %d bytes", len(result.data))
    return True
