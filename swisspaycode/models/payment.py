"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/models/payment.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Pydantic models for a Swiss QR-bill payment request. The
                models only carry raw user input; the validators in
                account.py, address.py and encoder.py decide what is legal.
------------------------------------------------------------------------------
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from swisspaycode.models.types import Currency


class Address(BaseModel):
    """
    Structured address (address type 'S').
    Length limits apply to the sanitized values and are checked by
    validate_address(), not by the model.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    street: str
    house_number: Optional[str] = Field(None, alias="houseNumber")
    postal_code: str = Field(alias="postalCode")
    city: str
    country: str


class Creditor(BaseModel):
    """Payee: a Swiss IBAN or QR-IBAN plus its address."""
    model_config = ConfigDict(frozen=True)

    account: str
    address: Address


class Debtor(BaseModel):
    """Payer. Carries no account."""
    model_config = ConfigDict(frozen=True)

    address: Address


class PaymentRequest(BaseModel):
    """
    Aggregate root for one encoding call.

    The currency is kept as plain text so that an unsupported code surfaces
    as a validation failure instead of a construction error.
    """
    model_config = ConfigDict(frozen=True)

    creditor: Creditor
    debtor: Optional[Debtor] = None
    amount: Optional[Decimal] = None
    currency: str = Currency.CHF.value
    reference: Optional[str] = None
    message: Optional[str] = None
