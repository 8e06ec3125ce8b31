"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/utils/checksum.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Check digit algorithms used by the Swiss QR-bill: ISO 7064
                mod 97-10 (IBAN, ISO 11649 creditor reference) and the
                recursive mod 10 used for 27-digit QR references.
------------------------------------------------------------------------------
"""

import re

MOD10_TABLE = (0, 9, 4, 6, 8, 2, 7, 1, 3, 5)

ALNUM_PATTERN = re.compile(r"[A-Z0-9]+")
DIGITS_PATTERN = re.compile(r"[0-9]+")


class ChecksumInputError(ValueError):
    """Input contains characters the algorithm cannot process."""


def _letters_to_digits(value: str) -> str:
    """Replaces letters with digits (A=10, B=11, ..., Z=35)."""
    numeric = ""
    for char in value:
        if char.isdigit():
            numeric += char
        else:
            numeric += str(ord(char) - 55)
    return numeric


def _reduce_mod97(numeric: str) -> int:
    """
    Reduces a digit string modulo 97 with a running remainder that is
    folded back whenever it grows past 9 digits.
    """
    remainder = ""
    for digit in numeric:
        remainder += digit
        if len(remainder) > 9:
            remainder = str(int(remainder) % 97)
    return int(remainder) % 97


def mod97_remainder(value: str) -> int:
    """
    Computes the ISO 7064 mod 97-10 remainder of an IBAN-like string.

    The first 4 characters (country/tag + check digits) are moved to the
    end before the letters are converted.

    Args:
        value: Uppercase alphanumeric string, at least 5 characters.

    Returns:
        The remainder (1 for a valid value).

    Raises:
        ChecksumInputError: On lowercase, punctuation, whitespace or a too
            short input.
    """
    if len(value) < 5 or not ALNUM_PATTERN.fullmatch(value):
        raise ChecksumInputError(f"Not a valid mod-97 input: {value!r}")

    rearranged = value[4:] + value[:4]
    return _reduce_mod97(_letters_to_digits(rearranged))


def is_mod97_valid(value: str) -> bool:
    """Returns True if the mod-97 remainder of value is 1."""
    try:
        return mod97_remainder(value) == 1
    except ChecksumInputError:
        return False


def mod97_check_digits(body: str, prefix: str) -> str:
    """
    Calculates the two check digits placed after prefix (e.g. "RF" or "CH")
    so that prefix + digits + body passes is_mod97_valid().

    Raises:
        ChecksumInputError: If body or prefix are not uppercase alphanumeric.
    """
    candidate = body + prefix + "00"
    if not ALNUM_PATTERN.fullmatch(candidate):
        raise ChecksumInputError(f"Not a valid mod-97 input: {body!r}")
    check = 98 - _reduce_mod97(_letters_to_digits(candidate))
    return f"{check:02d}"


def mod10_check_digit(digits: str) -> int:
    """
    Recursive mod 10 check digit (table driven).

    Args:
        digits: Digit string without check digit. May be empty.

    Returns:
        The check digit 0-9.

    Raises:
        ChecksumInputError: If digits contains anything but 0-9.
    """
    if digits and not DIGITS_PATTERN.fullmatch(digits):
        raise ChecksumInputError(f"Not a digit string: {digits!r}")

    carry = 0
    for digit in digits:
        carry = MOD10_TABLE[(carry + int(digit)) % 10]
    return (10 - carry) % 10


def is_mod10_valid(digits: str) -> bool:
    """Returns True if the last digit is the mod-10 check digit of the rest."""
    if len(digits) < 2 or not DIGITS_PATTERN.fullmatch(digits):
        return False
    return mod10_check_digit(digits[:-1]) == int(digits[-1])
