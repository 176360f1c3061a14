# agents/place_finder_agent.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import requests

from agents.budget_allocator_agent import BudgetAllocatorAgent
from clients.places_client import PlacesClient
from models.place import Place

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Failed to fetch tourist attractions. Using sample data instead."

_SAMPLE_IMAGES = [
    "https://images.unsplash.com/photo-1558086798-4805dc8df2ce?ixlib=rb-1.2.1&auto=format&fit=crop&w=1350&q=80",
    "https://images.unsplash.com/photo-1566127992631-17596ed6b017?ixlib=rb-1.2.1&auto=format&fit=crop&w=1350&q=80",
    "https://images.unsplash.com/photo-1563299796-17596ed6b017?ixlib=rb-1.2.1&auto=format&fit=crop&w=1350&q=80",
    "https://images.unsplash.com/photo-1555396273-367ea4eb4db5?ixlib=rb-1.2.1&auto=format&fit=crop&w=1350&q=80",
]


@dataclass
class PlaceResult:
    places: List[Place] = field(default_factory=list)
    # set when the backend failed and `places` holds sample data
    error: Optional[str] = None


def average_cost_label(places: List[Place]) -> str:
    levels = [p.price_level for p in places if p.price_level is not None]
    if not levels:
        return "Cost information not available"

    avg = sum(levels) / len(levels)
    if avg < 0.75:
        return "Budget-friendly"
    if avg < 1.75:
        return "Affordable"
    if avg < 2.75:
        return "Moderate"
    if avg < 3.75:
        return "Expensive"
    return "Very Expensive"


class PlaceFinderAgent:
    """
    Suggests attractions the activities budget can pay for.
    Places whose price level is above the allocator's affordable level are
    dropped; places without a price level are treated as free.
    """

    def __init__(self, client: Optional[PlacesClient] = None, limit: int = 10):
        self.client = client or PlacesClient()
        self.limit = limit

    def run(self, location: str, allocator: BudgetAllocatorAgent) -> PlaceResult:
        if not location:
            return PlaceResult()

        max_level = allocator.affordable_price_level()
        try:
            places = self.client.tourist_attractions(location, limit=self.limit)
        except (requests.RequestException, ValueError, TypeError, AttributeError) as e:
            logger.warning("⚠️ Tourist attractions fallback for %s: %s", location, e)
            samples = self.fallback_places(location, allocator.currency)
            return PlaceResult(places=self.affordable(samples, max_level), error=FALLBACK_MESSAGE)

        return PlaceResult(places=self.affordable(places, max_level))

    def affordable(self, places: List[Place], max_level: int) -> List[Place]:
        return [p for p in places if (p.price_level or 0) <= max_level]

    def fallback_places(self, location: str, currency: str = "USD") -> List[Place]:
        inr = currency == "INR"
        return [
            Place(
                id="1",
                name=f"{location} Historic Center",
                type="Landmark",
                rating=4.5,
                description=f"Free walking tour of the historic district of {location}.",
                image_url=_SAMPLE_IMAGES[0],
                price_level=0,
                vicinity=f"Central {location}",
            ),
            Place(
                id="2",
                name=f"{location} City Museum",
                type="Museum",
                rating=4.3,
                description=(
                    f"Cultural museum showcasing the history of {location}. "
                    f"Admission: {'₹1,250' if inr else '$15'} per person."
                ),
                image_url=_SAMPLE_IMAGES[1],
                price_level=1,
                vicinity=f"Museum District, {location}",
            ),
            Place(
                id="3",
                name=f"{location} Botanical Gardens",
                type="Park",
                rating=4.4,
                description=(
                    "Beautiful gardens with exotic plants and flowers. "
                    f"Entry fee: {'₹2,080' if inr else '$25'} per person."
                ),
                image_url=_SAMPLE_IMAGES[2],
                price_level=2,
                vicinity=f"North {location}",
            ),
            Place(
                id="4",
                name=f"{location} Cultural Experience",
                type="Activity",
                rating=4.7,
                description=(
                    "Premium cultural experience with dinner and entertainment. "
                    f"Cost: {'₹6,240' if inr else '$75'} per person."
                ),
                image_url=_SAMPLE_IMAGES[3],
                price_level=3,
                vicinity=f"Downtown {location}",
            ),
        ]
