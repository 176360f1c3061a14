# utils/money.py
from __future__ import annotations
import math
from typing import Any


def clamp_non_negative(x: float) -> float:
    return max(0.0, float(x))


def clamp(x: float, low: float, high: float) -> float:
    return max(low, min(high, x))


def safe_div(a: float, b: float) -> float:
    if b == 0:
        return 0.0
    return a / b


def round_half_up(x: float) -> int:
    """
    Round to the nearest integer, halves going toward +infinity
    (2.5 -> 3, -2.5 -> -2). Python's round() uses banker's rounding,
    which would make budget splits differ from the planner UI's figures.
    """
    return int(math.floor(x + 0.5))


def parse_number(value: Any, default: float = 0.0) -> float:
    """
    Lenient numeric parsing for free-text form input.
    "1,200" -> 1200.0, "" / "abc" / None -> default.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        if math.isnan(value) or math.isinf(value):
            return default
        return float(value)
    text = str(value).strip().replace(",", "")
    if not text:
        return default
    try:
        parsed = float(text)
    except ValueError:
        return default
    if math.isnan(parsed) or math.isinf(parsed):
        return default
    return parsed


def parse_int(value: Any, default: int = 0) -> int:
    parsed = parse_number(value, default=float("nan"))
    if math.isnan(parsed):
        return default
    return int(parsed)
