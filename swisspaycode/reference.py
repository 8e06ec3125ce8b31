"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/reference.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Determines and validates the payment reference type (QRR,
                SCOR, NON) against the account subtype and generates QR and
                creditor references from invoice numbers.
------------------------------------------------------------------------------
"""

import re
from typing import Optional

from swisspaycode.account import AccountClassification
from swisspaycode.errors import ErrorKind, Outcome
from swisspaycode.logger import get_logger
from swisspaycode.models.types import ReferenceType
from swisspaycode.utils.checksum import (
    is_mod10_valid,
    is_mod97_valid,
    mod10_check_digit,
    mod97_check_digits,
)

logger = get_logger("reference")

QR_REFERENCE_LENGTH = 27
SCOR_PREFIX = "RF"
SCOR_MIN_LENGTH = 5
SCOR_MAX_LENGTH = 25

QR_REFERENCE_PATTERN = re.compile(r"[0-9]{27}")
SCOR_PATTERN = re.compile(r"RF[0-9]{2}[A-Z0-9]{1,21}")


def normalize_reference(reference: Optional[str]) -> str:
    """Removes all whitespace from a reference. None becomes ''."""
    if not reference:
        return ""
    return "".join(reference.split())


def determine_reference_type(
    classification: AccountClassification,
    reference: Optional[str],
) -> Outcome[ReferenceType]:
    """
    Decides the reference type from the account subtype and the reference.

    Rules:
    - QR-IBAN requires a valid 27-digit QR reference.
    - A normal IBAN takes a valid RF creditor reference or no reference.
    - A QR reference on a normal IBAN is always rejected.

    Args:
        classification: Output of classify_account().
        reference: The raw reference (whitespace is ignored), or None.

    Returns:
        An Outcome holding the ReferenceType or a REFERENCE failure.
    """
    clean = normalize_reference(reference)
    restricted = classification.is_restricted_reference

    if not clean:
        if restricted:
            return Outcome.fail(
                ErrorKind.REFERENCE,
                "QR-IBAN requires a QR reference (27 digits). "
                "Use a normal IBAN if no reference is needed.",
                field="reference",
            )
        return Outcome.success(ReferenceType.NON)

    is_numeric = QR_REFERENCE_PATTERN.fullmatch(clean) is not None

    if restricted:
        if not is_numeric:
            return Outcome.fail(
                ErrorKind.REFERENCE,
                "QR-IBAN can only be used with a QR reference (27 digits)",
                field="reference",
            )
        if not is_mod10_valid(clean):
            return Outcome.fail(
                ErrorKind.REFERENCE, "QR reference check digit is invalid", field="reference"
            )
        return Outcome.success(ReferenceType.QRR)

    if is_numeric:
        return Outcome.fail(
            ErrorKind.REFERENCE,
            "QR reference (27 digits) can only be used with a QR-IBAN. "
            "Use a creditor reference (RF...) or remove the reference.",
            field="reference",
        )

    if not clean.startswith(SCOR_PREFIX):
        return Outcome.fail(
            ErrorKind.REFERENCE,
            "Reference must be a QR reference (27 digits) or a creditor reference (RF...)",
            field="reference",
        )

    if not SCOR_MIN_LENGTH <= len(clean) <= SCOR_MAX_LENGTH:
        return Outcome.fail(
            ErrorKind.REFERENCE,
            f"Creditor reference must be {SCOR_MIN_LENGTH} to {SCOR_MAX_LENGTH} characters long",
            field="reference",
        )

    if not SCOR_PATTERN.fullmatch(clean) or not is_mod97_valid(clean):
        return Outcome.fail(
            ErrorKind.REFERENCE, "Creditor reference check digits are invalid", field="reference"
        )

    return Outcome.success(ReferenceType.SCOR)


def generate_numeric_reference(seed: str) -> str:
    """
    Generates a 27-digit QR reference from any string containing digits
    (e.g. an invoice number).

    Only the digits of seed are used. They are left-padded with zeros to 26
    digits; longer digit runs keep their last 26 digits. The mod-10
    recursive check digit is appended.

    Example:
        "RE-2026-00042" -> "000000000000000002026000429"
    """
    digits = "".join(char for char in (seed or "") if char in "0123456789")
    body = digits[-26:].rjust(26, "0")
    return body + str(mod10_check_digit(body))


def generate_creditor_reference(seed: str) -> Optional[str]:
    """
    Builds an ISO 11649 creditor reference ("RFxx...") from an arbitrary
    identifier. Non-alphanumeric characters are dropped and the body is
    capped at 21 characters.

    Returns:
        The reference, or None if seed has no usable characters.
    """
    body = re.sub(r"[^0-9A-Z]", "", (seed or "").upper())[:21]
    if not body:
        logger.warning(f"Cannot build creditor reference from {seed!r}")
        return None
    return f"{SCOR_PREFIX}{mod97_check_digits(body, SCOR_PREFIX)}{body}"
