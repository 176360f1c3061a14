# models/preferences.py
from __future__ import annotations
from dataclasses import dataclass

@dataclass
class PlannerInput:
    location: str
    total_budget: float
    duration: int = 7
    currency: str = "USD"
