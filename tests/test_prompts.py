"""
Unit tests for prompt construction.
"""

from __future__ import annotations

from travexa.llm.prompts import (
    BUDGET_TIERS_BLOCK, COMMUTE_TIERS_BLOCK, COMMUTE_WITHIN_BUDGET_BLOCK, ITINERARY_SYSTEM_PROMPT,
    TRIP_PLAN_SYSTEM_PROMPT, build_itinerary_prompts, build_trip_plan_prompts, itinerary_count,
)
from travexa.schemas.travel_schemas import ItineraryRequest, TripPlanRequest


def make_request(**overrides) -> ItineraryRequest:
    body = {
        "destination": "Goa",
        "startDate": "2025-03-01",
        "endDate": "2025-03-04",
        "interests": ["beaches", "food"],
    }
    body.update(overrides)
    return ItineraryRequest.model_validate(body)


class TestTourismPrompt:
    def test_defaults_to_four_themed_options(self) -> None:
        system, user = build_itinerary_prompts(make_request())
        assert system == ITINERARY_SYSTEM_PROMPT
        assert user.startswith("Create 4 DIFFERENT trip itinerary options for 1 traveler(s) visiting Goa.")
        assert '"Hidden Gems"' in user
        assert "Dates: 2025-03-01 to 2025-03-04 (4 days)" in user
        assert "Interests: beaches, food" in user
        assert "No departure city specified" in user
        assert "comfort-focused" in user

    def test_single_option(self) -> None:
        request = make_request(generateMultiple=False)
        assert itinerary_count(request) == 1
        _, user = build_itinerary_prompts(request)
        assert user.startswith("Create 1 DIFFERENT")

    def test_budget_tiers_when_no_budget_given(self) -> None:
        _, user = build_itinerary_prompts(make_request(generateBudgetOptions=True, generateMultiple=False))
        assert BUDGET_TIERS_BLOCK in user
        assert "Budget: Not specified - generate options from minimum to luxury" in user

    def test_budget_tiers_ignored_when_budget_given(self) -> None:
        _, user = build_itinerary_prompts(make_request(generateBudgetOptions=True, budgetINR=50000))
        assert BUDGET_TIERS_BLOCK not in user
        assert "Budget: ₹50000" in user

    def test_origin_adds_transport_steps(self) -> None:
        _, user = build_itinerary_prompts(make_request(currentLocation="Pune"))
        assert "traveling from Pune to Goa" in user
        assert "Departure: Pune" in user
        assert "IMPORTANT: Include transport from Pune to Goa" in user

    def test_group_size_and_planner_mode(self) -> None:
        _, user = build_itinerary_prompts(make_request(groupSize=3, travelers=5, plannerMode="budget"))
        assert "for 3 traveler(s)" in user
        assert "budget-friendly" in user

    def test_json_skeleton_braces_survive_formatting(self) -> None:
        _, user = build_itinerary_prompts(make_request())
        assert '"itineraries": [' in user
        assert "{{" not in user


class TestCommutePrompt:
    def test_tiers_without_budget(self) -> None:
        _, user = build_itinerary_prompts(make_request(tripType="commute", currentLocation="Mumbai"))
        assert user.startswith("Create a multimodal travel plan for 1 traveler(s) from Mumbai to Goa.")
        assert COMMUTE_TIERS_BLOCK in user
        assert "Budget: Flexible - provide multiple options" in user

    def test_within_budget(self) -> None:
        _, user = build_itinerary_prompts(make_request(tripType="commute", budget="₹8,000"))
        assert COMMUTE_WITHIN_BUDGET_BLOCK in user
        assert "Origin: Not specified" in user
        assert "Budget: ₹8,000" in user


def test_trip_plan_prompt() -> None:
    request = TripPlanRequest.model_validate({
        "currentLocation": "Delhi",
        "destination": "Jaipur",
        "startDate": "2025-05-10",
        "endDate": "2025-05-12",
        "travelers": 2,
        "interests": ["forts"],
    })
    system, user = build_trip_plan_prompts(request)
    assert system == TRIP_PLAN_SYSTEM_PROMPT
    assert user.startswith("Create a 3-day trip itinerary for 2 traveler(s) traveling from Delhi to Jaipur.")
    assert "Budget level: moderate" in user
    assert '"coordinates": { "lat": 0.0, "lng": 0.0 }' in user
