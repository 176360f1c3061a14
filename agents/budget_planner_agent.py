# agents/budget_planner_agent.py
from __future__ import annotations

from typing import Any, Optional

from agents.budget_allocator_agent import BudgetAllocatorAgent
from agents.final_output_agent import FinalOutputAgent
from agents.place_finder_agent import PlaceFinderAgent
from agents.planner_input_agent import PlannerInputAgent
from agents.recommendation_agent import RecommendationAgent
from clients.places_client import PlacesClient


class BudgetPlannerAgent:
    """
    Orchestrator: input -> allocation -> recommendations + places -> markdown.
    Pass an existing allocator to keep a session's edited split.
    """

    def __init__(self, places_client: Optional[PlacesClient] = None):
        self.input_agent = PlannerInputAgent()
        self.place_agent = PlaceFinderAgent(client=places_client)
        self.output_agent = FinalOutputAgent()

    def run(self, raw: Any, allocator: Optional[BudgetAllocatorAgent] = None) -> str:
        planner_input = self.input_agent.normalize(raw)

        # 1) Allocation for this session
        if allocator is None:
            allocator = BudgetAllocatorAgent(currency=planner_input.currency)
        else:
            allocator.set_currency(planner_input.currency)
        allocator.set_duration(planner_input.duration)
        allocator.set_total_budget(planner_input.total_budget)
        plan = allocator.plan

        # 2) Advice and places only make sense with a budget and a destination
        recommendation_agent = RecommendationAgent(exchange_rates=allocator.exchange_rates)
        recommendations = recommendation_agent.run(plan, planner_input.location)
        places = None
        if plan.total_budget and planner_input.location:
            places = self.place_agent.run(planner_input.location, allocator)

        return self.output_agent.render(
            plan=plan,
            location=planner_input.location,
            recommendations=recommendations,
            places=places,
            exchange_rates=allocator.exchange_rates,
        )
