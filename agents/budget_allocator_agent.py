# agents/budget_allocator_agent.py
from __future__ import annotations

import copy
import logging
import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from models.budget import AffordabilityTier, BudgetCategory, BudgetPlan, default_categories
from utils.currency import BASE_CURRENCY, EXCHANGE_RATES, to_base
from utils.money import clamp, clamp_non_negative, parse_int, parse_number, round_half_up

logger = logging.getLogger(__name__)

# (low, high) per-day thresholds in USD
TIER_THRESHOLDS: Dict[str, Tuple[float, float]] = {
    "Accommodation": (50, 150),
    "Food & Drinks": (30, 100),
    "Transportation": (10, 50),
    "Activities": (20, 80),
}
DEFAULT_THRESHOLDS: Tuple[float, float] = (15, 50)

ACTIVITIES = "Activities"


def rebalance(percentages: Sequence[int], edited: int) -> List[int]:
    """
    Bring `percentages` back to a total of exactly 100 after the entry at
    index `edited` was changed.

    The shortfall (or excess) is spread over the other entries in proportion
    to their current share of the others' total, each rounded on its own and
    floored at 0. Whatever rounding leaves over is then added in one final
    pass to the first entry that isn't `edited` (or to `edited` itself when
    it is the only one). A negative residual skips entries it would push
    below zero.
    """
    result = [int(p) for p in percentages]
    delta = 100 - sum(result)
    if delta == 0:
        return result

    others = [i for i in range(len(result)) if i != edited]
    others_total = sum(result[i] for i in others)
    if others_total != 0:
        for i in others:
            adjustment = round_half_up(delta * result[i] / others_total)
            result[i] = max(0, result[i] + adjustment)

    residual = 100 - sum(result)
    if residual:
        _absorb_residual(result, others, edited, residual)
    return result


def _absorb_residual(result: List[int], others: List[int], edited: int, residual: int) -> None:
    if not others:
        result[edited] += residual
        return

    for i in others:
        if result[i] + residual >= 0:
            result[i] += residual
            return

    # No single entry can take the whole negative residual without going
    # below zero; drain the others in order. They always hold enough, since
    # the edited entry is at most 100.
    for i in others:
        take = min(result[i], -residual)
        result[i] -= take
        residual += take
        if residual == 0:
            return


def category_amount(percentage: int, total_budget: float) -> int:
    return round_half_up(percentage / 100 * total_budget)


def daily_amount(category: BudgetCategory, duration: int) -> int:
    return round_half_up(category.amount / max(1, int(duration)))


def affordability_tier(
    category: BudgetCategory,
    duration: int,
    currency: str = BASE_CURRENCY,
    exchange_rates: Optional[Dict[str, float]] = None,
) -> AffordabilityTier:
    amount_usd = to_base(category.amount, currency, exchange_rates)
    per_day = amount_usd / max(1, int(duration))
    low, high = TIER_THRESHOLDS.get(category.name, DEFAULT_THRESHOLDS)

    if per_day < low:
        return AffordabilityTier.BUDGET
    if per_day > high:
        return AffordabilityTier.LUXURY
    return AffordabilityTier.STANDARD


def affordable_price_level(
    activities_amount: float,
    duration: int,
    currency: str = BASE_CURRENCY,
    exchange_rates: Optional[Dict[str, float]] = None,
) -> int:
    """
    Highest place price level (1-3) the daily activities budget can cover.
    Price level 0 means free and is always affordable.
    """
    daily = round_half_up(activities_amount / max(1, int(duration)))
    if currency != BASE_CURRENCY:
        daily = round_half_up(to_base(daily, currency, exchange_rates))

    if daily < 30:
        return 1
    if daily < 60:
        return 2
    return 3


class BudgetAllocatorAgent:
    """
    Owns one planning session's budget categories.

    Percentages always sum to exactly 100; every amount is recomputed from its
    percentage and the total budget after each mutation. Mutators never raise
    on user input: values are coerced and clamped, and unknown category ids
    are ignored. Each mutator returns a snapshot of the updated categories.
    """

    def __init__(
        self,
        total_budget: float = 0.0,
        duration: int = 7,
        currency: str = BASE_CURRENCY,
        categories: Optional[List[BudgetCategory]] = None,
        exchange_rates: Optional[Dict[str, float]] = None,
    ):
        if categories is None:
            seeded = default_categories()
        else:
            seeded = [replace(c, percentage=int(c.percentage)) for c in categories]

        ids = [c.id for c in seeded]
        if len(set(ids)) != len(ids):
            raise ValueError("Category ids must be unique.")
        if sum(c.percentage for c in seeded) != 100:
            raise ValueError("Category percentages must sum to 100.")

        self.exchange_rates = dict(exchange_rates or EXCHANGE_RATES)
        self._lock = threading.RLock()
        self._plan = BudgetPlan(
            total_budget=clamp_non_negative(parse_number(total_budget)),
            duration=max(1, parse_int(duration, default=1)),
            currency=currency,
            categories=seeded,
        )
        self._recompute_amounts()

    # ---- reads ----

    @property
    def plan(self) -> BudgetPlan:
        with self._lock:
            return copy.deepcopy(self._plan)

    @property
    def categories(self) -> List[BudgetCategory]:
        with self._lock:
            return [replace(c) for c in self._plan.categories]

    @property
    def total_budget(self) -> float:
        return self._plan.total_budget

    @property
    def duration(self) -> int:
        return self._plan.duration

    @property
    def currency(self) -> str:
        return self._plan.currency

    def get(self, category_id: str) -> Optional[BudgetCategory]:
        with self._lock:
            found = self._plan.category(category_id)
            return replace(found) if found else None

    # ---- mutations ----

    def set_total_budget(self, new_total: Any) -> List[BudgetCategory]:
        with self._lock:
            self._plan.total_budget = clamp_non_negative(parse_number(new_total))
            self._recompute_amounts()
            logger.debug("Total budget set to %s", self._plan.total_budget)
            return self.categories

    def set_duration(self, days: Any) -> None:
        with self._lock:
            self._plan.duration = max(1, parse_int(days, default=1))

    def set_currency(self, currency: str) -> None:
        # amounts stay in the numbers the user typed; only their unit changes
        with self._lock:
            self._plan.currency = currency

    def set_category_percentage(self, category_id: str, requested_percentage: Any) -> List[BudgetCategory]:
        with self._lock:
            index = self._index_of(category_id)
            if index is None:
                logger.debug("Ignoring percentage change for unknown category %r", category_id)
                return self.categories

            requested = round_half_up(parse_number(requested_percentage))
            percentages = [c.percentage for c in self._plan.categories]
            percentages[index] = int(clamp(requested, 0, 100))

            final = rebalance(percentages, index)
            for cat, pct in zip(self._plan.categories, final):
                cat.percentage = pct
            self._recompute_amounts()

            logger.debug(
                "Category %s set to %s%%; distribution now %s",
                category_id, percentages[index], final,
            )
            return self.categories

    def set_category_amount(self, category_id: str, requested_amount: Any) -> List[BudgetCategory]:
        with self._lock:
            total = self._plan.total_budget
            if total <= 0:
                logger.debug("Ignoring amount change for %r: no total budget", category_id)
                return self.categories

            # clamped first: a tiny total can push the ratio to infinity
            share = clamp(parse_number(requested_amount) / total * 100, 0, 100)
            return self.set_category_percentage(category_id, round_half_up(share))

    # ---- derived reads ----

    def daily_amount(self, category: BudgetCategory, duration: Optional[int] = None) -> int:
        return daily_amount(category, self._plan.duration if duration is None else duration)

    def affordability_tier(
        self,
        category: BudgetCategory,
        duration: Optional[int] = None,
        currency: Optional[str] = None,
        exchange_rates: Optional[Dict[str, float]] = None,
    ) -> AffordabilityTier:
        return affordability_tier(
            category,
            self._plan.duration if duration is None else duration,
            currency or self._plan.currency,
            exchange_rates or self.exchange_rates,
        )

    def affordable_price_level(self) -> int:
        with self._lock:
            activities = self._plan.category_by_name(ACTIVITIES)
            amount = activities.amount if activities else 0
            return affordable_price_level(
                amount, self._plan.duration, self._plan.currency, self.exchange_rates
            )

    # ---- internals ----

    def _index_of(self, category_id: str) -> Optional[int]:
        for i, cat in enumerate(self._plan.categories):
            if cat.id == category_id:
                return i
        return None

    def _recompute_amounts(self) -> None:
        total = self._plan.total_budget
        for cat in self._plan.categories:
            cat.amount = category_amount(cat.percentage, total)
