import swisspaycode

def test_rendering_helpers_exported():
    assert swisspaycode.format_account_for_display("CH4431999123000889012") == "CH44 3199 9123 0008 8901 2"
    assert swisspaycode.is_restricted_reference_account("CH4431999123000889012") is True
    assert swisspaycode.is_restricted_reference_account("CH9300762011623852957") is False

def test_reference_type_tags():
    assert [t.value for t in swisspaycode.ReferenceType] == ["QRR", "SCOR", "NON"]
    assert [c.value for c in swisspaycode.Currency] == ["CHF", "EUR"]
