from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

CENT = Decimal("0.01")


def to_decimal(val: Union[int, float, Decimal, str]) -> Decimal:
    """Converts a monetary value to Decimal without binary float noise."""
    if isinstance(val, Decimal):
        return val
    return Decimal(str(val))


def format_payload_amount(val: Optional[Decimal]) -> str:
    """Amount field of the payload: exactly 2 decimals, empty if absent."""
    if val is None:
        return ""
    return str(to_decimal(val).quantize(CENT, rounding=ROUND_HALF_UP))


def round_to_five_rappen(val: Union[int, float, Decimal, str]) -> Decimal:
    """
    Rounds a total to the nearest 0.05 (round(amount * 20) / 20, half up).
    Display only, the payload carries the exact amount.
    """
    twentieths = (to_decimal(val) * 20).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return (twentieths / 20).quantize(CENT)


def format_amount_for_display(val: Union[int, float, Decimal, str, None]) -> str:
    """
    Formats an amount the Swiss way.
    1234567.5 -> 1'234'567.50
    """
    if val is None:
        return "---"

    amount = to_decimal(val).quantize(CENT, rounding=ROUND_HALF_UP)
    return f"{amount:,.2f}".replace(",", "'")


def format_account_for_display(account: str) -> str:
    """
    Groups an IBAN into blocks of 4 characters.
    CH9300762011623852957 -> CH93 0076 2011 6238 5295 7
    """
    clean = "".join(account.split())
    return " ".join(clean[i:i + 4] for i in range(0, len(clean), 4))
