"""
Endpoint tests for itinerary and trip plan generation.
"""

from __future__ import annotations

import json

import httpx
import openai
import pytest


VALID_BODY = {
    "destination": "Goa",
    "startDate": "2025-03-01",
    "endDate": "2025-03-04",
    "interests": ["beaches"],
}

TRIP_PLAN_BODY = {
    "currentLocation": "Delhi",
    "destination": "Jaipur",
    "startDate": "2025-05-10",
    "endDate": "2025-05-12",
}


def status_error(status: int) -> openai.APIStatusError:
    request = httpx.Request("POST", "https://gateway.test/v1/chat/completions")
    return openai.APIStatusError(f"upstream {status}", response=httpx.Response(status, request=request), body=None)


class TestGenerateItinerary:
    def test_success_returns_model_json(self, client, fake_completions) -> None:
        plan = {"itineraries": [{"id": "1", "title": "Classic Explorer", "steps": []}]}
        fake_completions.reply = f"```json\n{json.dumps(plan)}\n```"

        response = client.post("/api/itinerary/generate", json=VALID_BODY)

        assert response.status_code == 200
        assert response.json() == plan
        (call,) = fake_completions.calls
        assert call["model"] == "itinerary-model"

    def test_missing_destination(self, client, fake_completions) -> None:
        body = {k: v for k, v in VALID_BODY.items() if k != "destination"}
        response = client.post("/api/itinerary/generate", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"
        assert fake_completions.calls == []

    def test_too_many_interests(self, client) -> None:
        body = dict(VALID_BODY, interests=[f"i{n}" for n in range(21)])
        response = client.post("/api/itinerary/generate", json=body)
        assert response.status_code == 400

    def test_bad_start_date(self, client) -> None:
        response = client.post("/api/itinerary/generate", json=dict(VALID_BODY, startDate="soon"))
        assert response.status_code == 400
        assert response.json()["details"] == "Invalid start date"

    def test_reversed_dates(self, client, fake_completions) -> None:
        body = dict(VALID_BODY, startDate="2025-03-04", endDate="2025-03-01")
        response = client.post("/api/itinerary/generate", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "End date must be after start date"}
        assert fake_completions.calls == []

    def test_trip_longer_than_sixty_days(self, client) -> None:
        body = dict(VALID_BODY, startDate="2025-01-01", endDate="2025-03-15")
        response = client.post("/api/itinerary/generate", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Trip duration cannot exceed 60 days"}

    @pytest.mark.parametrize(
        "status, message",
        [
            (429, "Rate limit exceeded. Please wait a few minutes before trying again."),
            (402, "AI credits exhausted. Please add credits to continue."),
            (500, "Failed to generate itinerary. Please try again."),
        ],
    )
    def test_gateway_errors(self, client, fake_completions, status, message) -> None:
        fake_completions.error = status_error(status)
        response = client.post("/api/itinerary/generate", json=VALID_BODY)
        assert response.status_code == status
        assert response.json() == {"error": message}

    @pytest.mark.parametrize("reply", ['{"plan": []}', "not json", ""])
    def test_malformed_reply(self, client, fake_completions, reply) -> None:
        fake_completions.reply = reply
        response = client.post("/api/itinerary/generate", json=VALID_BODY)
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate itinerary"}

    def test_utc_start_with_plain_end_date(self, client, fake_completions) -> None:
        fake_completions.reply = '{"itineraries": []}'
        body = dict(VALID_BODY, startDate="2025-03-01T00:00:00Z", endDate="2025-03-04")
        response = client.post("/api/itinerary/generate", json=body)
        assert response.status_code == 200
        assert "(4 days)" in fake_completions.calls[0]["messages"][1]["content"]

    def test_date_errors_reported_before_missing_key(self, client, generator) -> None:
        generator.gateway.api_key = ""
        body = dict(VALID_BODY, startDate="2025-03-04", endDate="2025-03-01")
        response = client.post("/api/itinerary/generate", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "End date must be after start date"}

    def test_gateway_not_configured(self, client, generator) -> None:
        generator.gateway.api_key = ""
        response = client.post("/api/itinerary/generate", json=VALID_BODY)
        assert response.status_code == 500
        assert response.json() == {"error": "AI gateway not configured"}


class TestGenerateTripPlan:
    def test_success_uses_first_fenced_block(self, client, fake_completions) -> None:
        fake_completions.reply = (
            'Sure!\n```json\n{"title": "Pink City", "reason": "Forts", "steps": []}\n```\n'
            "```\nnotes\n```"
        )
        response = client.post("/api/trip-plan/generate", json=TRIP_PLAN_BODY)
        assert response.status_code == 200
        assert response.json()["title"] == "Pink City"
        assert fake_completions.calls[0]["model"] == "plan-model"

    def test_utc_start_with_plain_end_date(self, client, fake_completions) -> None:
        fake_completions.reply = '{"title": "Pink City", "steps": []}'
        body = dict(TRIP_PLAN_BODY, startDate="2025-05-10T00:00:00Z")
        response = client.post("/api/trip-plan/generate", json=body)
        assert response.status_code == 200
        assert "Create a 3-day trip itinerary" in fake_completions.calls[0]["messages"][1]["content"]

    def test_rate_limited(self, client, fake_completions) -> None:
        fake_completions.error = status_error(429)
        response = client.post("/api/trip-plan/generate", json=TRIP_PLAN_BODY)
        assert response.status_code == 429
        assert response.json() == {"error": "Rate limit exceeded. Please try again later."}

    def test_out_of_credits(self, client, fake_completions) -> None:
        fake_completions.error = status_error(402)
        response = client.post("/api/trip-plan/generate", json=TRIP_PLAN_BODY)
        assert response.status_code == 402

    def test_unparseable_reply(self, client, fake_completions) -> None:
        fake_completions.reply = "no json here"
        response = client.post("/api/trip-plan/generate", json=TRIP_PLAN_BODY)
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to parse trip plan"}

    def test_missing_fields(self, client) -> None:
        response = client.post("/api/trip-plan/generate", json={"destination": "Jaipur"})
        assert response.status_code == 400
