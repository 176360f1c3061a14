# models/budget.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional


@dataclass
class BudgetCategory:
    id: str
    name: str
    percentage: int
    # derived from percentage and the plan's total; never set it directly
    amount: int = 0


class AffordabilityTier(IntEnum):
    BUDGET = 0
    STANDARD = 1
    LUXURY = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def level(self) -> str:
        return ("low", "medium", "high")[self.value]


DEFAULT_DISTRIBUTION = [
    ("1", "Accommodation", 35),
    ("2", "Food & Drinks", 25),
    ("3", "Transportation", 15),
    ("4", "Activities", 15),
    ("5", "Shopping", 5),
    ("6", "Miscellaneous", 5),
]


def default_categories() -> List[BudgetCategory]:
    return [BudgetCategory(id=i, name=n, percentage=p) for i, n, p in DEFAULT_DISTRIBUTION]


@dataclass
class BudgetPlan:
    total_budget: float = 0.0
    duration: int = 7
    currency: str = "USD"
    categories: List[BudgetCategory] = field(default_factory=default_categories)

    @property
    def total_percentage(self) -> int:
        return sum(c.percentage for c in self.categories)

    @property
    def total_allocated(self) -> int:
        return sum(c.amount for c in self.categories)

    def category(self, category_id: str) -> Optional[BudgetCategory]:
        return next((c for c in self.categories if c.id == category_id), None)

    def category_by_name(self, name: str) -> Optional[BudgetCategory]:
        return next((c for c in self.categories if c.name == name), None)
