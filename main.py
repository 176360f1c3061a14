# main.py
from __future__ import annotations
import logging
import os
import sys

from agents.budget_allocator_agent import BudgetAllocatorAgent
from agents.budget_planner_agent import BudgetPlannerAgent
from models.preferences import PlannerInput

if __name__ == "__main__":
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    location = sys.argv[1] if len(sys.argv) > 1 else "Lisbon"
    planner_input = PlannerInput(
        location=location,
        total_budget=2100,
        duration=7,
        currency="USD",
    )

    # An edited split, as a user dragging the accommodation slider would leave it.
    allocator = BudgetAllocatorAgent()
    allocator.set_category_percentage("1", 40)

    agent = BudgetPlannerAgent()
    print(agent.run(planner_input, allocator=allocator))
