# models/recommendation.py
from __future__ import annotations
from dataclasses import dataclass

@dataclass
class Recommendation:
    id: str
    title: str
    description: str
    # already formatted in the plan's currency, e.g. "$50 per night"
    estimated_cost: str
    category: str
