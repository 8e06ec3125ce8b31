"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/account.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Validates Swiss creditor accounts (IBAN / QR-IBAN) and
                classifies them by the embedded institution identifier (IID).
------------------------------------------------------------------------------
"""

from dataclasses import dataclass

from swisspaycode.errors import ErrorKind, Outcome
from swisspaycode.logger import get_logger
from swisspaycode.utils.checksum import is_mod97_valid

logger = get_logger("account")

ACCOUNT_LENGTH = 21
DOMESTIC_PREFIX = "CH"

# QR-IID range reserved for QR-IBANs
QR_IID_MIN = 30000
QR_IID_MAX = 31999


@dataclass(frozen=True)
class AccountClassification:
    """
    Result of a successful account check.

    Attributes:
        account: The normalized account (no whitespace, uppercase).
        institution_id: The 5-digit IID at positions 5-9.
        is_restricted_reference: True for a QR-IBAN.
    """

    account: str
    institution_id: int
    is_restricted_reference: bool


def normalize_account(account: str) -> str:
    """Removes all whitespace and uppercases the account."""
    return "".join(account.split()).upper()


def classify_account(account: str) -> Outcome[AccountClassification]:
    """
    Validates a Swiss IBAN and determines whether it is a QR-IBAN.

    Args:
        account: The IBAN, with or without grouping spaces.

    Returns:
        An Outcome holding the AccountClassification, or an ACCOUNT failure
        for a missing value, wrong length, wrong prefix, non-alphanumeric
        characters or a failed mod-97 check.
    """
    if not account or not account.strip():
        return Outcome.fail(ErrorKind.ACCOUNT, "Creditor IBAN is required", field="account")

    clean = normalize_account(account)

    if not clean.startswith(DOMESTIC_PREFIX):
        return Outcome.fail(
            ErrorKind.ACCOUNT,
            f'IBAN must start with "{DOMESTIC_PREFIX}" (Swiss IBAN required)',
            field="account",
        )

    if len(clean) != ACCOUNT_LENGTH:
        return Outcome.fail(
            ErrorKind.ACCOUNT,
            f"Swiss IBAN must be {ACCOUNT_LENGTH} characters long (without spaces), got {len(clean)}",
            field="account",
        )

    if not is_mod97_valid(clean):
        return Outcome.fail(ErrorKind.ACCOUNT, "IBAN check digits are invalid", field="account")

    iid_raw = clean[4:9]
    if not iid_raw.isdecimal():
        return Outcome.fail(
            ErrorKind.ACCOUNT,
            f"IBAN institution identifier must be numeric: {iid_raw}",
            field="account",
        )

    iid = int(iid_raw)
    restricted = QR_IID_MIN <= iid <= QR_IID_MAX
    logger.debug(f"Account {clean[:4]}... IID {iid} -> {'QR-IBAN' if restricted else 'IBAN'}")
    return Outcome.success(AccountClassification(clean, iid, restricted))


def is_restricted_reference_account(account: str) -> bool:
    """
    Returns True if account is a valid QR-IBAN.
    Malformed accounts are reported as not restricted.
    """
    if not account:
        return False
    outcome = classify_account(account)
    return outcome.ok and outcome.value.is_restricted_reference
