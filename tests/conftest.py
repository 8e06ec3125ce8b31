import logging
from decimal import Decimal

import pytest

from swisspaycode.models import Address, Creditor, Debtor, PaymentRequest

# Valid Swiss IBANs (mod-97 checked)
QR_IBAN = "CH4431999123000889012"        # IID 31999 -> QR-IBAN
NORMAL_IBAN = "CH9300762011623852957"    # IID 00762 -> normal IBAN
QR_REFERENCE = "210000000003139471430009017"
SCOR_REFERENCE = "RF18539007547034"


@pytest.fixture
def creditor_address():
    return Address(
        name="Muster AG",
        street="Bahnhofstrasse",
        house_number="1",
        postal_code="8001",
        city="Zürich",
        country="CH",
    )


@pytest.fixture
def debtor_address():
    return Address(
        name="Pia-Maria Rutschmann-Schnyder",
        street="Grosse Marktgasse",
        house_number="28",
        postal_code="9400",
        city="Rorschach",
        country="CH",
    )


@pytest.fixture
def qr_creditor(creditor_address):
    return Creditor(account=QR_IBAN, address=creditor_address)


@pytest.fixture
def normal_creditor(creditor_address):
    return Creditor(account=NORMAL_IBAN, address=creditor_address)


@pytest.fixture
def qr_request(qr_creditor, debtor_address):
    return PaymentRequest(
        creditor=qr_creditor,
        debtor=Debtor(address=debtor_address),
        amount=Decimal("1994.75"),
        currency="CHF",
        reference=QR_REFERENCE,
        message="Rechnung RE-2026-00042",
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Keeps handlers installed by setup_logging() from leaking between tests."""
    yield
    root = logging.getLogger("swisspaycode")
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("swisspaycode."):
            logging.getLogger(name).setLevel(logging.NOTSET)
