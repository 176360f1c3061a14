# utils/currency.py
from __future__ import annotations
from typing import Dict, Optional

from utils.money import round_half_up

BASE_CURRENCY = "USD"

# Units of each currency per 1 USD (static, approximate).
EXCHANGE_RATES: Dict[str, float] = {
    "USD": 1.0,
    "INR": 83.14,
}

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "INR": "₹",
}


def is_supported(code: str) -> bool:
    return code in EXCHANGE_RATES


def to_base(amount: float, currency: str, exchange_rates: Optional[Dict[str, float]] = None) -> float:
    """Convert an amount in `currency` into USD. Unknown currencies pass through unchanged."""
    rates = exchange_rates or EXCHANGE_RATES
    rate = rates.get(currency) or 1.0
    return amount / rate


def group_indian(n: int) -> str:
    """1234567 -> '12,34,567' (thousands, then every two digits)."""
    digits = str(abs(n))
    sign = "-" if n < 0 else ""
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    parts = []
    while len(head) > 2:
        parts.insert(0, head[-2:])
        head = head[:-2]
    if head:
        parts.insert(0, head)
    return sign + ",".join(parts + [tail])


def format_currency(amount: float, currency: str = BASE_CURRENCY) -> str:
    if currency == "INR":
        return "₹" + group_indian(round_half_up(amount))

    symbol = CURRENCY_SYMBOLS.get(currency, "$")
    sign = "-" if amount < 0 else ""
    value = abs(amount)
    if float(value).is_integer():
        return f"{sign}{symbol}{value:,.0f}"
    return f"{sign}{symbol}{value:,.2f}"


def format_price_level(price_level: Optional[int], currency: str = BASE_CURRENCY) -> str:
    if price_level is None:
        return "Not available"
    if price_level == 0:
        return "Free"
    if 1 <= price_level <= 4:
        return CURRENCY_SYMBOLS.get(currency, "$") * price_level
    return "Not available"
