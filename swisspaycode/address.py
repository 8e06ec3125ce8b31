"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/address.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Validation of structured (type 'S') addresses for creditor
                and debtor. All limits are measured on sanitized text.
------------------------------------------------------------------------------
"""

from typing import Optional

from swisspaycode.errors import ErrorKind, ValidationFailure
from swisspaycode.models.payment import Address
from swisspaycode.models.types import AddressRole
from swisspaycode.utils.sanitizer import sanitize

MAX_NAME = 70
MAX_STREET = 70
MAX_HOUSE_NUMBER = 16
MAX_POSTAL_CODE = 16
MAX_CITY = 35
COUNTRY_LENGTH = 2


def _check_field(
    value: Optional[str],
    field: str,
    label: str,
    max_length: int,
    role: AddressRole,
    required: bool = True,
) -> Optional[ValidationFailure]:
    clean = sanitize(value)
    if not clean:
        if required:
            return ValidationFailure(ErrorKind.ADDRESS, f"{label} is required", field, role)
        return None
    if len(clean) > max_length:
        return ValidationFailure(
            ErrorKind.ADDRESS,
            f"{label} must not exceed {max_length} characters",
            field,
            role,
        )
    return None


def validate_address(address: Address, role: AddressRole) -> Optional[ValidationFailure]:
    """
    Checks a structured address field by field and reports the first
    violation.

    Order: name, street, house number, postal code, city, country.

    Args:
        address: The address to check.
        role: Creditor or Debtor, used to tag the failure.

    Returns:
        None if the address is valid, otherwise the ValidationFailure.
    """
    checks = (
        (address.name, "name", "Name", MAX_NAME, True),
        (address.street, "street", "Street", MAX_STREET, True),
        (address.house_number, "house_number", "House number", MAX_HOUSE_NUMBER, False),
        (address.postal_code, "postal_code", "Postal code", MAX_POSTAL_CODE, True),
        (address.city, "city", "City", MAX_CITY, True),
    )
    for value, field, label, max_length, required in checks:
        failure = _check_field(value, field, label, max_length, role, required)
        if failure:
            return failure

    country = sanitize(address.country)
    if len(country) != COUNTRY_LENGTH or not (country.isascii() and country.isalpha()):
        return ValidationFailure(
            ErrorKind.ADDRESS,
            'Country must be a 2-letter ISO code (e.g. "CH")',
            "country",
            role,
        )
    return None
