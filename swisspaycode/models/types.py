"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/models/types.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Centralized enumeration and type definitions.
------------------------------------------------------------------------------
"""

from enum import Enum


class Currency(str, Enum):
    """Currencies accepted by the Swiss Payment Code."""
    CHF = "CHF"
    EUR = "EUR"


class ReferenceType(str, Enum):
    """Reference type tag written to the payload."""
    # 27 digits, mod-10 recursive check digit (QR-IBAN only)
    QRR = "QRR"
    # ISO 11649 creditor reference "RFxx..." (normal IBAN only)
    SCOR = "SCOR"
    NON = "NON"


class AddressRole(str, Enum):
    """Party an address belongs to. The value is used in error messages."""
    CREDITOR = "Creditor"
    DEBTOR = "Debtor"
