"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/models/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Package initializer for the payment data models. Exports
                Address, Creditor, Debtor and PaymentRequest for easy access.
------------------------------------------------------------------------------
"""

from .payment import Address, Creditor, Debtor, PaymentRequest
