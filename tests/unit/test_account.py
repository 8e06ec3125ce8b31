"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           tests/unit/test_account.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for IBAN validation and QR-IBAN classification.
------------------------------------------------------------------------------
"""

import pytest
from swisspaycode.account import classify_account, is_restricted_reference_account
from swisspaycode.errors import ErrorKind

@pytest.mark.parametrize("iban, iid, restricted", [
    ("CH4929999123456789012", 29999, False),
    ("CH5730000123456789012", 30000, True),
    ("CH4431999123456789012", 31999, True),
    ("CH5232000123456789012", 32000, False),
])
def test_qr_iid_boundaries(iban, iid, restricted):
    """The QR-IID range 30000-31999 is inclusive on both ends."""
    outcome = classify_account(iban)
    assert outcome.ok
    assert outcome.value.institution_id == iid
    assert outcome.value.is_restricted_reference is restricted
    assert is_restricted_reference_account(iban) is restricted

def test_grouped_and_lowercase_input_is_normalized():
    outcome = classify_account(" ch44 3199 9123 0008 8901 2 ")
    assert outcome.ok
    assert outcome.value.account == "CH4431999123000889012"
    assert outcome.value.is_restricted_reference

def test_normal_iban():
    outcome = classify_account("CH93 0076 2011 6238 5295 7")
    assert outcome.ok
    assert not outcome.value.is_restricted_reference

@pytest.mark.parametrize("account, fragment", [
    ("", "required"),
    ("   ", "required"),
    ("DE89370400440532013000", "CH"),
    ("CH930076201162385295", "21 characters"),
    ("CH93007620116238529577", "21 characters"),
    ("CH9400762011623852957", "check digits"),
    ("CH93-0076201162385295", "check digits"),
])
def test_malformed_accounts(account, fragment):
    outcome = classify_account(account)
    assert not outcome.ok
    assert outcome.failure.kind == ErrorKind.ACCOUNT
    assert outcome.failure.field == "account"
    assert fragment in outcome.failure.message

def test_restricted_helper_never_raises_on_garbage():
    assert is_restricted_reference_account("") is False
    assert is_restricted_reference_account("CH4431999123000889013") is False
    assert is_restricted_reference_account("not an iban") is False
