# agents/planner_input_agent.py
from __future__ import annotations
from typing import Any, Dict

from models.preferences import PlannerInput
from utils.currency import BASE_CURRENCY, is_supported
from utils.money import clamp, clamp_non_negative, parse_int, parse_number

DEFAULT_DURATION = 7

# Range the planner's sliders allow for a single category.
SLIDER_MIN = 5
SLIDER_MAX = 60


class PlannerInputAgent:
    """
    Validates/normalizes user input into PlannerInput.
    Works with either a raw dict (form fields, possibly free text) OR an
    already built PlannerInput.
    """

    def normalize(self, raw: Any) -> PlannerInput:
        if isinstance(raw, PlannerInput):
            planner_input = raw
        elif isinstance(raw, dict):
            planner_input = self._from_dict(raw)
        else:
            raise TypeError("PlannerInputAgent.normalize expects PlannerInput or dict")

        planner_input.location = str(planner_input.location or "").strip()

        # Unparseable budgets count as zero, not as an error.
        planner_input.total_budget = clamp_non_negative(parse_number(planner_input.total_budget))

        # Unparseable or non-positive durations fall back to a single day.
        planner_input.duration = max(1, parse_int(planner_input.duration, default=1))

        currency = str(planner_input.currency or "").strip().upper()
        planner_input.currency = currency if is_supported(currency) else BASE_CURRENCY

        return planner_input

    def clamp_slider(self, value: Any) -> int:
        return int(clamp(parse_int(value, default=SLIDER_MIN), SLIDER_MIN, SLIDER_MAX))

    def _from_dict(self, d: Dict[str, Any]) -> PlannerInput:
        return PlannerInput(
            location=str(d.get("location") or d.get("destination") or ""),
            total_budget=d.get("total_budget", 0),
            duration=DEFAULT_DURATION if d.get("duration") is None else d["duration"],
            currency=d.get("currency") or BASE_CURRENCY,
        )
