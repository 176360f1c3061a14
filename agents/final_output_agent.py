# agents/final_output_agent.py
from __future__ import annotations
from typing import Dict, List, Optional

from agents.budget_allocator_agent import affordability_tier, daily_amount
from agents.place_finder_agent import PlaceResult, average_cost_label
from models.budget import BudgetPlan
from models.recommendation import Recommendation
from utils.currency import format_currency, format_price_level
from utils.money import round_half_up

class FinalOutputAgent:
    def render(
        self,
        plan: BudgetPlan,
        location: str,
        recommendations: Optional[List[Recommendation]] = None,
        places: Optional[PlaceResult] = None,
        exchange_rates: Optional[Dict[str, float]] = None,
    ) -> str:
        lines: List[str] = []
        def money(amount: float) -> str:
            return format_currency(amount, plan.currency)

        lines.append("✅ Budget Plan")
        lines.append("")
        lines.append("### Trip")
        lines.append(f"- **Destination:** {location or '—'}")
        lines.append(f"- **Duration:** {plan.duration} days")
        lines.append(f"- **Budget:** {money(plan.total_budget)} ({plan.currency})")
        lines.append(f"- **Per day:** {money(daily_amount_of_total(plan))}")
        lines.append("")

        lines.append("### Allocation")
        lines.append("| Category | Share | Amount | Per day | Level |")
        lines.append("|---|---|---|---|---|")
        for cat in plan.categories:
            tier = affordability_tier(cat, plan.duration, plan.currency, exchange_rates)
            lines.append(
                f"| {cat.name} | {cat.percentage}% | {money(cat.amount)} "
                f"| {money(daily_amount(cat, plan.duration))} | {tier.label} |"
            )
        lines.append(f"| **Total** | {plan.total_percentage}% | {money(plan.total_allocated)} | | |")
        lines.append("")

        lines.append("### Recommendations")
        if not recommendations:
            lines.append("- _Enter a destination and budget to get recommendations._")
        else:
            for r in recommendations:
                lines.append(f"- **{r.title}** ({r.category}): {r.description} _{r.estimated_cost}_")
        lines.append("")

        lines.append("### Suggested places")
        if places is None or not places.places:
            lines.append("- _No places found within your activities budget._")
        else:
            for p in places.places:
                where = f" | {p.vicinity}" if p.vicinity else ""
                lines.append(
                    f"- **{p.name}** ({p.type}) | ⭐ {p.rating} | "
                    f"{format_price_level(p.price_level, plan.currency)}{where}"
                )
            lines.append(f"- _Overall cost: {average_cost_label(places.places)}_")

        if places is not None and places.error:
            lines.append("")
            lines.append(f"⚠️ {places.error}")

        return "\n".join(lines)


def daily_amount_of_total(plan: BudgetPlan) -> int:
    return round_half_up(plan.total_budget / max(1, plan.duration))
