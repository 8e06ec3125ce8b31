"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           tests/unit/test_checksum.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for the mod-97 and mod-10 recursive check digits.
------------------------------------------------------------------------------
"""

import random

import pytest
from swisspaycode.utils.checksum import (
    ChecksumInputError,
    is_mod10_valid,
    is_mod97_valid,
    mod10_check_digit,
    mod97_check_digits,
    mod97_remainder,
)

VALID_IBANS = [
    "CH9300762011623852957",
    "CH4431999123000889012",
    "CH4929999123456789012",
    "CH5730000123456789012",
    "CH5232000123456789012",
]


class TestMod97:
    @pytest.mark.parametrize("iban", VALID_IBANS)
    def test_valid_ibans(self, iban):
        assert mod97_remainder(iban) == 1
        assert is_mod97_valid(iban)

    def test_wrong_check_digits(self):
        assert not is_mod97_valid("CH9400762011623852957")
        assert not is_mod97_valid("CH4431999123000889013")

    @pytest.mark.parametrize("iban", [
        "CH9300762011623852957",
        "CH4929999123456789012",
        "CH5730000123456789012",
        "CH5232000123456789012",
    ])
    def test_swapping_check_digits_invalidates(self, iban):
        swapped = iban[:2] + iban[3] + iban[2] + iban[4:]
        assert swapped != iban
        assert not is_mod97_valid(swapped)

    def test_creditor_reference(self):
        assert is_mod97_valid("RF18539007547034")
        assert is_mod97_valid("RF18000000000539007547034")
        assert not is_mod97_valid("RF19539007547034")

    @pytest.mark.parametrize("value", ["ch9300762011623852957", "CH93 0076", "CH93-0076201", "CH9", ""])
    def test_malformed_input_is_rejected_not_filtered(self, value):
        with pytest.raises(ChecksumInputError):
            mod97_remainder(value)
        assert not is_mod97_valid(value)

    def test_check_digit_generation(self):
        assert mod97_check_digits("539007547034", "RF") == "18"
        assert mod97_check_digits("00762011623852957", "CH") == "93"
        assert mod97_check_digits("12345", "RF") == "78"


class TestMod10:
    def test_known_reference(self):
        assert mod10_check_digit("21000000000313947143000901") == 7
        assert is_mod10_valid("210000000003139471430009017")

    def test_wrong_check_digit(self):
        assert not is_mod10_valid("210000000003139471430009018")

    def test_all_zero(self):
        assert mod10_check_digit("0" * 26) == 0

    def test_round_trip(self):
        """Any 26-digit body plus its check digit validates."""
        rng = random.Random(2026)
        for _ in range(200):
            body = "".join(rng.choice("0123456789") for _ in range(26))
            assert is_mod10_valid(body + str(mod10_check_digit(body)))

    def test_non_digits_rejected(self):
        with pytest.raises(ChecksumInputError):
            mod10_check_digit("12A4")
        assert not is_mod10_valid("1234 5")
        assert not is_mod10_valid("7")
