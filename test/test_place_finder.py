import pytest
import requests

from agents.budget_allocator_agent import BudgetAllocatorAgent
from agents.place_finder_agent import FALLBACK_MESSAGE, PlaceFinderAgent, average_cost_label
from clients.places_client import PlacesClient
from models.place import Place


class StubPlacesClient:
    def __init__(self, places=None, error=None):
        self.places = places or []
        self.error = error
        self.calls = []

    def tourist_attractions(self, destination, limit=10):
        self.calls.append((destination, limit))
        if self.error:
            raise self.error
        return self.places


def place(id, price_level):
    return Place(id=id, name=f"Place {id}", type="Museum", rating=4.0, description="", price_level=price_level)


def test_keeps_only_affordable_places():
    client = StubPlacesClient(places=[place("a", 0), place("b", None), place("c", 1), place("d", 2), place("e", 3)])
    allocator = BudgetAllocatorAgent(total_budget=1000, duration=7)  # 21/day on activities -> level 1

    result = PlaceFinderAgent(client=client).run("Lisbon", allocator)

    assert [p.id for p in result.places] == ["a", "b", "c"]
    assert result.error is None
    assert client.calls == [("Lisbon", 10)]


def test_bigger_activities_budget_unlocks_pricier_places():
    client = StubPlacesClient(places=[place("a", 1), place("b", 2), place("c", 3)])
    allocator = BudgetAllocatorAgent(total_budget=1000, duration=7)
    allocator.set_category_percentage("4", 60)

    result = PlaceFinderAgent(client=client).run("Lisbon", allocator)

    assert [p.id for p in result.places] == ["a", "b", "c"]


def test_falls_back_to_samples_when_backend_fails():
    client = StubPlacesClient(error=requests.ConnectionError("backend down"))
    allocator = BudgetAllocatorAgent(total_budget=1000, duration=7)

    result = PlaceFinderAgent(client=client).run("Lisbon", allocator)

    assert [p.name for p in result.places] == ["Lisbon Historic Center", "Lisbon City Museum"]
    assert result.error == FALLBACK_MESSAGE


def test_no_location_skips_the_backend():
    client = StubPlacesClient(places=[place("a", 0)])
    result = PlaceFinderAgent(client=client).run("", BudgetAllocatorAgent(total_budget=1000))
    assert result.places == []
    assert client.calls == []


def test_fallback_samples_in_rupees():
    samples = PlaceFinderAgent(client=StubPlacesClient()).fallback_places("Jaipur", "INR")
    assert [p.price_level for p in samples] == [0, 1, 2, 3]
    assert "₹1,250" in samples[1].description
    assert samples[3].vicinity == "Downtown Jaipur"


@pytest.mark.parametrize("levels, label", [
    ([], "Cost information not available"),
    ([None], "Cost information not available"),
    ([0, 1], "Budget-friendly"),
    ([1, 2], "Affordable"),
    ([2, 3, None], "Moderate"),
    ([3, 4], "Expensive"),
    ([4], "Very Expensive"),
])
def test_average_cost_label(levels, label):
    places = [place(str(i), lvl) for i, lvl in enumerate(levels)]
    assert average_cost_label(places) == label


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


def test_client_requests_tourist_attractions(monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params, timeout))
        return FakeResponse({
            "attractions": [
                {"id": "p1", "name": "Belem Tower", "type": "museum", "rating": 4.6,
                 "price_level": 2, "vicinity": "Belem", "imageUrl": "http://img"},
            ]
        })

    monkeypatch.setattr("clients.places_client.requests.get", fake_get)
    client = PlacesClient(api_url="http://planner.test/api/")

    places = client.tourist_attractions("Lisbon", limit=5)

    assert calls == [("http://planner.test/api/places/tourist-attractions",
                      {"destination": "Lisbon", "limit": 5}, 10)]
    assert places[0].name == "Belem Tower"
    assert places[0].price_level == 2
    assert places[0].image_url == "http://img"


def test_client_reads_api_url_from_environment(monkeypatch):
    monkeypatch.setenv("TRIP_PLANNER_API_URL", "http://env.test/api")
    assert PlacesClient().api_url == "http://env.test/api"


def test_client_raises_on_http_error(monkeypatch):
    monkeypatch.setattr(
        "clients.places_client.requests.get",
        lambda url, params=None, timeout=None: FakeResponse({"error": "Destination is required"}, 400),
    )
    with pytest.raises(requests.HTTPError):
        PlacesClient(api_url="http://planner.test/api").tourist_attractions("")


def test_missing_attractions_key_yields_no_places(monkeypatch):
    monkeypatch.setattr(
        "clients.places_client.requests.get",
        lambda url, params=None, timeout=None: FakeResponse({}),
    )
    assert PlacesClient(api_url="http://planner.test/api").tourist_attractions("Lisbon") == []


def test_junk_numbers_from_backend_count_as_missing():
    p = Place.from_dict({"id": "x", "name": "X", "rating": "N/A", "price_level": "cheap"})
    assert p.rating == 0.0
    assert p.price_level is None


def test_lenient_fields_still_reach_the_filter(monkeypatch):
    monkeypatch.setattr(
        "clients.places_client.requests.get",
        lambda url, params=None, timeout=None: FakeResponse({
            "attractions": [
                {"id": "p1", "name": "Belem Tower", "rating": "N/A", "price_level": "1"},
                {"id": "p2", "name": "Casino Lisboa", "rating": "4.0", "price_level": 4},
            ]
        }),
    )
    allocator = BudgetAllocatorAgent(total_budget=1000, duration=7)

    result = PlaceFinderAgent(client=PlacesClient(api_url="http://planner.test/api")).run("Lisbon", allocator)

    assert [p.name for p in result.places] == ["Belem Tower"]
    assert result.places[0].rating == 0.0
    assert result.error is None


@pytest.mark.parametrize("payload", [
    [],
    ["not", "an", "object"],
    {"attractions": ["Belem Tower"]},
])
def test_falls_back_on_malformed_payload(monkeypatch, payload):
    monkeypatch.setattr(
        "clients.places_client.requests.get",
        lambda url, params=None, timeout=None: FakeResponse(payload),
    )
    allocator = BudgetAllocatorAgent(total_budget=1000, duration=7)

    result = PlaceFinderAgent(client=PlacesClient(api_url="http://planner.test/api")).run("Lisbon", allocator)

    assert [p.name for p in result.places] == ["Lisbon Historic Center", "Lisbon City Museum"]
    assert result.error == FALLBACK_MESSAGE


def test_falls_back_when_client_raises_value_error():
    client = StubPlacesClient(error=ValueError("Expecting value: line 1 column 1"))
    allocator = BudgetAllocatorAgent(total_budget=1000, duration=7)

    result = PlaceFinderAgent(client=client).run("Lisbon", allocator)

    assert result.error == FALLBACK_MESSAGE
