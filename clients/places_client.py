# clients/places_client.py
from __future__ import annotations
import os
import requests
from typing import Any, Dict, List, Optional
from dotenv import load_dotenv

from models.place import Place

DEFAULT_API_URL = "http://localhost:5000/api"


class PlacesClient:
    """
    Reads tourist attractions from the planner backend, which geocodes the
    destination and looks up nearby attractions with their price levels.
    """

    def __init__(self, api_url: Optional[str] = None, timeout: int = 10):
        load_dotenv()
        self.api_url = (api_url or os.getenv("TRIP_PLANNER_API_URL") or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout

    def get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.api_url}/{path.lstrip('/')}"
        res = requests.get(url, params=params, timeout=self.timeout)
        res.raise_for_status()
        return res.json()

    def tourist_attractions(self, destination: str, limit: int = 10) -> List[Place]:
        data = self.get(
            "places/tourist-attractions",
            params={"destination": destination, "limit": limit},
        )
        return [Place.from_dict(item) for item in (data.get("attractions") or [])]
