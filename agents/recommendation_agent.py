# agents/recommendation_agent.py
from __future__ import annotations
from typing import Dict, List, Optional

from models.budget import BudgetPlan
from models.recommendation import Recommendation
from utils.currency import EXCHANGE_RATES, format_currency, to_base
from utils.money import round_half_up, safe_div

# Whole-trip budget bands, in USD.
LOW_BUDGET_LIMIT = 1000
MEDIUM_BUDGET_LIMIT = 3000


class RecommendationAgent:
    """
    Canned spending advice for a plan.
    The trip's total budget picks a level (low / medium / high); each level
    yields one tip for accommodation, food and activities, with cost figures
    taken from the plan's category amounts.
    """

    def __init__(self, exchange_rates: Optional[Dict[str, float]] = None):
        self.exchange_rates = dict(exchange_rates or EXCHANGE_RATES)

    def budget_level(self, total_budget: float, currency: str) -> str:
        total_usd = total_budget
        if currency in self.exchange_rates and self.exchange_rates[currency] != 1:
            total_usd = round_half_up(to_base(total_budget, currency, self.exchange_rates))

        if total_usd < LOW_BUDGET_LIMIT:
            return "low"
        if total_usd < MEDIUM_BUDGET_LIMIT:
            return "medium"
        return "high"

    def run(self, plan: BudgetPlan, location: str) -> List[Recommendation]:
        if not plan.total_budget or not location:
            return []

        level = self.budget_level(plan.total_budget, plan.currency)
        builders = {
            "low": self._low,
            "medium": self._medium,
            "high": self._high,
        }
        return builders[level](plan, location)

    # ---- per-level content ----

    def _low(self, plan: BudgetPlan, location: str) -> List[Recommendation]:
        inr = plan.currency == "INR"
        return [
            Recommendation(
                id="1",
                title="Budget Accommodation",
                description=(
                    f"Look for hostels or budget hotels in {location}. "
                    + ("Check for dharamshalas or homestays for authentic experiences."
                       if inr else "Consider shared rooms or apartments away from city center.")
                ),
                estimated_cost=self._per_night(plan),
                category="Accommodation",
            ),
            Recommendation(
                id="2",
                title="Local Street Food",
                description=(
                    "Try local street food and markets instead of restaurants. "
                    + ("Local thalis and street food stalls offer authentic meals at much better prices."
                       if inr else "Cook some meals if your accommodation has a kitchen.")
                ),
                estimated_cost=self._per_meal(plan, meals_per_day=3),
                category="Food & Drinks",
            ),
            Recommendation(
                id="3",
                title="Free Activities",
                description=(
                    f"Visit free museums, parks, and walking tours in {location}. "
                    + ("Many temples and historical sites have nominal entry fees or free days."
                       if inr else "Many attractions have discounted or free days.")
                ),
                estimated_cost="Free - ₹1,250" if inr else "Free - $15",
                category="Activities",
            ),
        ]

    def _medium(self, plan: BudgetPlan, location: str) -> List[Recommendation]:
        inr = plan.currency == "INR"
        stays = "3-star hotels or nice guest houses" if inr else "3-star hotels or nice Airbnb"
        return [
            Recommendation(
                id="1",
                title="Mid-range Hotels",
                description=f"{stays} in good locations around {location}. Look for deals with breakfast included.",
                estimated_cost=self._per_night(plan),
                category="Accommodation",
            ),
            Recommendation(
                id="2",
                title="Local Restaurants",
                description=(
                    "Mix of casual dining and trying some nicer local restaurants. "
                    + ("Look for thali meals at mid-range restaurants for the best value."
                       if inr else "Save premium dining for special occasions.")
                ),
                estimated_cost=self._per_meal(plan, meals_per_day=3),
                category="Food & Drinks",
            ),
            Recommendation(
                id="3",
                title="Paid Attractions & Tours",
                description=(
                    f"Budget for main attractions in {location} and consider a day tour to nearby areas. "
                    + ("Look for government-approved guides for better rates."
                       if inr else "Look for city passes for discounts.")
                ),
                estimated_cost=self._per_activity(plan, every_n_days=2) + " per activity",
                category="Activities",
            ),
        ]

    def _high(self, plan: BudgetPlan, location: str) -> List[Recommendation]:
        inr = plan.currency == "INR"
        return [
            Recommendation(
                id="1",
                title="Luxury Accommodation",
                description=(
                    f"4-5 star hotels in prime locations in {location}. "
                    + ("Consider heritage properties or palace hotels for unique Indian experiences."
                       if inr else "Consider boutique hotels with unique experiences.")
                ),
                estimated_cost=self._per_night(plan),
                category="Accommodation",
            ),
            Recommendation(
                id="2",
                title="Fine Dining Experiences",
                description=(
                    f"Enjoy the best restaurants {location} has to offer, "
                    + ("including authentic regional cuisine at signature restaurants."
                       if inr else "including Michelin-starred venues if available.")
                ),
                estimated_cost=self._per_meal(plan, meals_per_day=2),
                category="Food & Drinks",
            ),
            Recommendation(
                id="3",
                title="Premium Experiences",
                description=(
                    "Consider exclusive tours, private guides, and unique local experiences "
                    + ("like private temple tours, cultural performances, or craft workshops."
                       if inr else "like cooking classes or special events.")
                ),
                estimated_cost=self._per_activity(plan, every_n_days=3) + " per experience",
                category="Activities",
            ),
        ]

    # ---- cost strings ----

    def _amount(self, plan: BudgetPlan, name: str) -> int:
        cat = plan.category_by_name(name)
        return cat.amount if cat else 0

    def _per_night(self, plan: BudgetPlan) -> str:
        nightly = round_half_up(self._amount(plan, "Accommodation") / max(1, plan.duration))
        return format_currency(nightly, plan.currency) + " per night"

    def _per_meal(self, plan: BudgetPlan, meals_per_day: int) -> str:
        meal = round_half_up(self._amount(plan, "Food & Drinks") / max(1, plan.duration) / meals_per_day)
        return format_currency(meal, plan.currency) + " per meal"

    def _per_activity(self, plan: BudgetPlan, every_n_days: int) -> str:
        # one paid activity every `every_n_days` days
        each = round_half_up(safe_div(self._amount(plan, "Activities"), max(1, plan.duration) / every_n_days))
        return format_currency(each, plan.currency)
