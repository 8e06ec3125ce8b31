"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/records.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Smart constructors that turn loosely typed rows from the
                persistence layer (company, customer, invoice dictionaries)
                into validated payment models. Nothing from the database
                reaches the encoder without passing through here.
------------------------------------------------------------------------------
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from swisspaycode.account import classify_account
from swisspaycode.address import validate_address
from swisspaycode.errors import ErrorKind, Outcome
from swisspaycode.logger import get_logger
from swisspaycode.models.payment import Address, Creditor, Debtor, PaymentRequest
from swisspaycode.models.types import AddressRole, Currency
from swisspaycode.reference import generate_numeric_reference
from swisspaycode.utils.formatting import to_decimal

logger = get_logger("records")

# Country names found in customer rows instead of ISO codes
COUNTRY_ALIASES: Dict[str, str] = {
    "SCHWEIZ": "CH",
    "SUISSE": "CH",
    "SVIZZERA": "CH",
    "SVIZRA": "CH",
    "SWITZERLAND": "CH",
    "LIECHTENSTEIN": "LI",
    "DEUTSCHLAND": "DE",
    "GERMANY": "DE",
    "ÖSTERREICH": "AT",
    "AUSTRIA": "AT",
    "FRANKREICH": "FR",
    "FRANCE": "FR",
    "ITALIEN": "IT",
    "ITALIA": "IT",
    "ITALY": "IT",
}


def normalize_country(value: Optional[str]) -> str:
    """
    Maps free-text country entries to ISO alpha-2 codes.
    "Schweiz" -> "CH", "ch" -> "CH", unknown names -> first two letters.
    """
    if not value:
        return ""
    clean = value.strip().upper()
    if clean in COUNTRY_ALIASES:
        return COUNTRY_ALIASES[clean]
    return clean[:2]


class _TextRecord(BaseModel):
    """Base for upstream rows: unknown columns are ignored, scalars become text."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def coerce_scalars(cls, v: Any) -> Any:
        """Postal codes and house numbers often arrive as integers."""
        if isinstance(v, bool):
            return v
        if isinstance(v, (int, Decimal)):
            return str(v)
        return v


class AddressRecord(_TextRecord):
    """Address columns as stored for companies and customers."""
    name: Optional[str] = None
    street: Optional[str] = None
    house_number: Optional[str] = Field(
        None, validation_alias=AliasChoices("house_number", "houseNumber")
    )
    postal_code: Optional[str] = Field(
        None, validation_alias=AliasChoices("zip_code", "postal_code", "postalCode", "zip")
    )
    city: Optional[str] = None
    country: Optional[str] = None


class CompanyRecord(AddressRecord):
    """Company settings row. The QR-IBAN wins over the normal IBAN."""
    iban: Optional[str] = None
    qr_iban: Optional[str] = None


class InvoiceRecord(_TextRecord):
    """Invoice row fields relevant for the payment part."""
    invoice_number: Optional[str] = None
    total: Optional[Any] = None
    currency: Optional[str] = None


def _parse(model: type, record: Any, what: str) -> Outcome[Any]:
    if not isinstance(record, Mapping):
        return Outcome.fail(
            ErrorKind.RECORD, f"{what} record must be a mapping, got {type(record).__name__}"
        )
    try:
        return Outcome.success(model.model_validate(dict(record)))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ())) or None
        return Outcome.fail(ErrorKind.RECORD, f"{what} record is malformed: {first.get('msg')}", field=field)


def _to_address(row: AddressRecord, role: AddressRole, country: Optional[str]) -> Outcome[Address]:
    address = Address(
        name=row.name or "",
        street=row.street or "",
        house_number=row.house_number or None,
        postal_code=row.postal_code or "",
        city=row.city or "",
        country=country if country is not None else normalize_country(row.country),
    )
    failure = validate_address(address, role)
    if failure:
        return Outcome.from_failure(failure)
    return Outcome.success(address)


def address_from_record(
    record: Mapping[str, Any],
    role: AddressRole,
    default_country: Optional[str] = None,
) -> Outcome[Address]:
    """
    Builds and validates an Address from an upstream row.

    Args:
        record: Mapping with name, street, house_number, zip_code/postal_code,
            city and country columns.
        role: Creditor or Debtor, used to tag failures.
        default_country: Used when the row carries no country.

    Returns:
        An Outcome holding the Address, or a RECORD/ADDRESS failure.
    """
    parsed = _parse(AddressRecord, record, role.value)
    if not parsed.ok:
        return Outcome.from_failure(parsed.failure)

    row: AddressRecord = parsed.value
    country = None
    if not (row.country or "").strip() and default_country:
        country = default_country.upper()
    return _to_address(row, role, country)


def creditor_from_company(company: Mapping[str, Any], country: str = "CH") -> Outcome[Creditor]:
    """
    Builds the creditor from the company settings row.

    The account is the QR-IBAN if one is stored, otherwise the IBAN. The
    creditor country is always taken from the country argument.
    """
    parsed = _parse(CompanyRecord, company, AddressRole.CREDITOR.value)
    if not parsed.ok:
        return Outcome.from_failure(parsed.failure)

    row: CompanyRecord = parsed.value
    account = (row.qr_iban or "").strip() or (row.iban or "").strip()
    if not account:
        return Outcome.fail(
            ErrorKind.ACCOUNT, "No IBAN stored. Add a QR-IBAN or IBAN to the company settings.", field="account"
        )

    classification = classify_account(account)
    if not classification.ok:
        return Outcome.from_failure(classification.failure)

    address = _to_address(row, AddressRole.CREDITOR, country.upper())
    if not address.ok:
        return Outcome.from_failure(address.failure)

    return Outcome.success(Creditor(account=classification.value.account, address=address.value))


def debtor_from_customer(customer: Mapping[str, Any], default_country: str = "CH") -> Outcome[Debtor]:
    """Builds the debtor from a customer row."""
    address = address_from_record(customer, AddressRole.DEBTOR, default_country)
    if not address.ok:
        return Outcome.from_failure(address.failure)
    return Outcome.success(Debtor(address=address.value))


def request_for_invoice(
    company: Mapping[str, Any],
    customer: Optional[Mapping[str, Any]],
    invoice: Mapping[str, Any],
    config: Optional[Any] = None,
) -> Outcome[PaymentRequest]:
    """
    Builds the payment request printed on an invoice.

    - Amount is the invoice total.
    - Currency is the invoice currency, else the configured default.
    - A QR reference is generated from the invoice number when the account
      is a QR-IBAN. Normal IBANs get no reference.
    - The message is "Rechnung <invoice number>".

    Args:
        company: Company settings row (creditor).
        customer: Customer row (debtor), or None for a slip without payer.
        invoice: Invoice row with invoice_number, total and optional currency.
        config: Optional AppConfig supplying default currency and creditor country.

    Returns:
        An Outcome holding the PaymentRequest or the first failure.
    """
    parsed = _parse(InvoiceRecord, invoice, "Invoice")
    if not parsed.ok:
        return Outcome.from_failure(parsed.failure)
    row: InvoiceRecord = parsed.value

    creditor_country = config.get_creditor_country() if config is not None else "CH"
    creditor = creditor_from_company(company, creditor_country)
    if not creditor.ok:
        return Outcome.from_failure(creditor.failure)

    debtor = None
    if customer is not None:
        debtor_outcome = debtor_from_customer(customer)
        if not debtor_outcome.ok:
            return Outcome.from_failure(debtor_outcome.failure)
        debtor = debtor_outcome.value

    amount = None
    if row.total is not None and row.total != "":
        try:
            amount = to_decimal(row.total)
        except (InvalidOperation, ValueError):
            amount = None
        if amount is None or not amount.is_finite():
            return Outcome.fail(ErrorKind.AMOUNT, f"Invoice total is not a number: {row.total!r}", field="amount")

    default_currency = config.get_default_currency() if config is not None else Currency.CHF.value
    currency = (row.currency or default_currency).strip().upper()

    invoice_number = (row.invoice_number or "").strip()
    reference = None
    if classify_account(creditor.value.account).value.is_restricted_reference:
        reference = generate_numeric_reference(invoice_number)
        logger.debug(f"QR reference {reference} generated for invoice {invoice_number!r}")

    message = f"Rechnung {invoice_number}" if invoice_number else None

    return Outcome.success(
        PaymentRequest(
            creditor=creditor.value,
            debtor=debtor,
            amount=amount,
            currency=currency,
            reference=reference,
            message=message,
        )
    )
