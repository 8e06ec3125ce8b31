"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/encoder.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Generates the Swiss Payment Code (SPC) payload embedded in the
                QR code of a Swiss QR-bill. Validates the full request first;
                no payload is produced for invalid input.
                Reference: Swiss Payment Standards, Implementation Guidelines
                for the QR-bill, version 2.3.
------------------------------------------------------------------------------
"""

from decimal import Decimal
from typing import List, Optional

from swisspaycode.account import classify_account, normalize_account
from swisspaycode.address import (
    MAX_CITY,
    MAX_HOUSE_NUMBER,
    MAX_NAME,
    MAX_POSTAL_CODE,
    MAX_STREET,
    validate_address,
)
from swisspaycode.errors import ErrorKind, Outcome, PayloadShapeError
from swisspaycode.logger import get_logger, log_payload
from swisspaycode.models.payment import Address, PaymentRequest
from swisspaycode.models.types import AddressRole, Currency, ReferenceType
from swisspaycode.reference import determine_reference_type, normalize_reference
from swisspaycode.utils.formatting import format_payload_amount
from swisspaycode.utils.sanitizer import sanitize, truncate

logger = get_logger("encoder")

QR_TYPE = "SPC"
VERSION = "0200"
CODING_TYPE = "1"  # UTF-8 restricted to the Latin character set
ADDRESS_TYPE_STRUCTURED = "S"
TRAILER = "EPD"
LINE_SEPARATOR = "\r\n"
PAYLOAD_LINES = 33

AMOUNT_MIN = Decimal("0.01")
AMOUNT_MAX = Decimal("999999999.99")
MAX_MESSAGE = 140


def _address_lines(address: Optional[Address]) -> List[str]:
    """The 6 structured address fields, or 6 empty strings."""
    if address is None:
        return [""] * 6
    return [
        truncate(address.name, MAX_NAME),
        truncate(address.street, MAX_STREET),
        truncate(address.house_number, MAX_HOUSE_NUMBER),
        truncate(address.postal_code, MAX_POSTAL_CODE),
        truncate(address.city, MAX_CITY),
        sanitize(address.country).upper(),
    ]


def validate_request(request: PaymentRequest) -> Outcome[ReferenceType]:
    """
    Runs every check on a payment request and determines the reference type.

    Order: creditor account, creditor address, amount, currency, reference,
    debtor address, message. The first failure is returned.

    Args:
        request: The payment request.

    Returns:
        An Outcome holding the ReferenceType to encode, or the first failure.
    """
    account = classify_account(request.creditor.account)
    if not account.ok:
        return Outcome.from_failure(account.failure)

    failure = validate_address(request.creditor.address, AddressRole.CREDITOR)
    if failure:
        return Outcome.from_failure(failure)

    if request.amount is not None:
        if not request.amount.is_finite() or not AMOUNT_MIN <= request.amount <= AMOUNT_MAX:
            return Outcome.fail(
                ErrorKind.AMOUNT,
                "Amount must be between 0.01 and 999'999'999.99",
                field="amount",
            )

    if request.currency not in {c.value for c in Currency}:
        return Outcome.fail(
            ErrorKind.CURRENCY,
            f"Currency must be CHF or EUR, got {request.currency!r}",
            field="currency",
        )

    reference_type = determine_reference_type(account.value, request.reference)
    if not reference_type.ok:
        return reference_type

    if request.debtor is not None:
        failure = validate_address(request.debtor.address, AddressRole.DEBTOR)
        if failure:
            return Outcome.from_failure(failure)

    if len(sanitize(request.message)) > MAX_MESSAGE:
        return Outcome.fail(
            ErrorKind.MESSAGE,
            f"Message must not exceed {MAX_MESSAGE} characters",
            field="message",
        )

    return reference_type


def encode_payload(request: PaymentRequest, reference_type: ReferenceType) -> str:
    """
    Assembles the 33 payload lines of an already validated request.

    Callers must run validate_request() first and pass its reference type.

    Raises:
        PayloadShapeError: If the line layout is broken (programming error).
    """
    debtor_address = request.debtor.address if request.debtor is not None else None

    lines: List[str] = [
        QR_TYPE,
        VERSION,
        CODING_TYPE,
        normalize_account(request.creditor.account),
        ADDRESS_TYPE_STRUCTURED,
        *_address_lines(request.creditor.address),
        # Ultimate creditor: reserved for future use, must stay empty
        "", "", "", "", "", "", "",
        format_payload_amount(request.amount),
        request.currency,
        ADDRESS_TYPE_STRUCTURED,
        *_address_lines(debtor_address),
        reference_type.value,
        normalize_reference(request.reference),
        truncate(request.message, MAX_MESSAGE),
        TRAILER,
        # Alternative procedures
        "",
        "",
    ]

    if len(lines) != PAYLOAD_LINES:
        raise PayloadShapeError(
            f"SPC payload must have exactly {PAYLOAD_LINES} lines, got {len(lines)}"
        )

    return LINE_SEPARATOR.join(lines)


def create_payment_code(request: PaymentRequest) -> Outcome[str]:
    """
    Validates a payment request and encodes it.

    Args:
        request: The payment request built from raw user input.

    Returns:
        An Outcome holding the CRLF-joined payload, or the first failure.
    """
    reference_type = validate_request(request)
    if not reference_type.ok:
        logger.info(f"Payment code rejected: {reference_type.failure}")
        return Outcome.from_failure(reference_type.failure)

    payload = encode_payload(request, reference_type.value)
    logger.debug(f"Payment code generated ({reference_type.value.value}, {len(payload)} chars)")
    log_payload(payload, reference_type.value.value)
    return Outcome.success(payload)


def build_payment_code(request: PaymentRequest) -> str:
    """
    Exception-style wrapper around create_payment_code().

    Raises:
        PaymentCodeError: If the request is invalid.
    """
    return create_payment_code(request).unwrap()
