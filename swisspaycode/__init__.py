"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Swiss QR-bill payment code encoder and validator. Exposes the
                request models, the encoding pipeline and the helpers used by
                the rendering layer.
------------------------------------------------------------------------------
"""

from swisspaycode.account import classify_account, is_restricted_reference_account
from swisspaycode.encoder import (
    build_payment_code,
    create_payment_code,
    encode_payload,
    validate_request,
)
from swisspaycode.errors import (
    ErrorKind,
    Outcome,
    PaymentCodeError,
    PayloadShapeError,
    ValidationFailure,
)
from swisspaycode.models import Address, Creditor, Debtor, PaymentRequest
from swisspaycode.models.types import AddressRole, Currency, ReferenceType
from swisspaycode.reference import (
    determine_reference_type,
    generate_creditor_reference,
    generate_numeric_reference,
)
from swisspaycode.utils.formatting import (
    format_account_for_display,
    format_amount_for_display,
    round_to_five_rappen,
)
from swisspaycode.utils.sanitizer import sanitize, sanitize_for_display
