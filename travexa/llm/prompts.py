"""
Langchain Prompt Templates
Defines prompts for itinerary generation (tourism and commute) and the
single-itinerary trip plan
"""

from typing import Tuple

from langchain_core.prompts import PromptTemplate

from travexa.schemas.travel_schemas import ItineraryRequest, PlannerMode, TripPlanRequest, TripType


# ============================================
# System Prompts
# ============================================

ITINERARY_SYSTEM_PROMPT = """You are a travel planning AI that creates detailed, bookable trip itineraries in JSON format.
Return ONLY valid JSON with no additional text. The response must be a valid JSON object.
All costs should be in INR (Indian Rupees)."""

TRIP_PLAN_SYSTEM_PROMPT = """You are a travel planning AI. Generate detailed trip itineraries in JSON format.
Return ONLY valid JSON with no additional text. The response must be a valid JSON object."""

PLANNER_MODE_DESCRIPTIONS = {
    PlannerMode.COMFORT: "comfort-focused with premium experiences, luxury stays, and relaxation",
    PlannerMode.TIME: "time-optimized with efficient scheduling and maximum activities",
    PlannerMode.BUDGET: "budget-friendly with cost-effective options and money-saving tips",
}

# ============================================
# Commute (multimodal A -> B) Prompt
# ============================================

COMMUTE_PROMPT = PromptTemplate(
    input_variables=["travelers", "origin", "origin_detail", "destination",
                     "start_date", "end_date", "budget", "options_block"],
    template="""Create a multimodal travel plan for {travelers} traveler(s) from {origin} to {destination}.

Trip Details:
- Origin: {origin_detail}
- Destination: {destination}
- Travel Date: {start_date}
- Return Date: {end_date}
- Budget: {budget}

This is a COMMUTE/GENERAL trip, NOT tourism. Focus ONLY on:
1. The most efficient way to get from Point A to Point B
2. Consider multimodal options: flights, trains, buses, and interconnections
3. If direct flights are unavailable, calculate complex routes (e.g., flight to nearest airport → train to city → bus to final destination)
4. Include waiting times, transfer logistics, and total journey duration

{options_block}

Return a JSON object with this structure:
{{
  "itineraries": [
    {{
      "id": "unique-id",
      "title": "Route Name (e.g., 'Budget Route via Train')",
      "subtitle": "Brief description",
      "reason": "Why choose this route (1-2 sentences)",
      "estimatedTotalCost": 5000,
      "totalDuration": "12 hours",
      "steps": [
        {{
          "id": "step-id",
          "day": 1,
          "time": "06:00",
          "title": "Flight/Train/Bus Name",
          "description": "Departure and arrival details",
          "location": "Station/Airport name",
          "duration": "3 hours",
          "category": "transport",
          "transportType": "flight|train|bus|metro|taxi",
          "isBookable": true,
          "estimatedCost": 3000,
          "fromStation": "Mumbai Central",
          "toStation": "Ahmedabad Junction"
        }}
      ]
    }}
  ]
}}

Include realistic Indian transport options (Indian Railways, IndiGo, SpiceJet, RedBus operators, etc.)."""
)

COMMUTE_TIERS_BLOCK = """Since no budget was specified, generate 4 DISTINCT transport options:
1. "Minimum Cost" - Cheapest possible route (may involve more transfers/time)
2. "Economy" - Good balance of cost and comfort
3. "Standard" - Comfortable travel with reasonable speed
4. "Maximum Comfort" - Fastest/most luxurious options available

Each option should have genuinely different routes and transport modes."""

COMMUTE_WITHIN_BUDGET_BLOCK = "Generate the optimal route within the specified budget."

# ============================================
# Tourism Prompt
# ============================================

TOURISM_PROMPT = PromptTemplate(
    input_variables=["count", "travelers", "route", "departure_line", "destination",
                     "start_date", "end_date", "trip_days", "budget", "interests",
                     "mode_description", "options_block", "transport_note"],
    template="""Create {count} DIFFERENT trip itinerary options for {travelers} traveler(s) {route}{destination}.

Trip Details:
- {departure_line}
- Destination: {destination}
- Dates: {start_date} to {end_date} ({trip_days} days)
- Budget: {budget}
- Interests: {interests}
- Planning Style: {mode_description}

{options_block}

{transport_note}

Return a JSON object with this structure:
{{
  "itineraries": [
    {{
      "id": "unique-id",
      "title": "Itinerary Theme Title",
      "subtitle": "Brief tagline",
      "reason": "Why this itinerary is great (1-2 sentences)",
      "estimatedTotalCost": 50000,
      "budgetTier": "economy",
      "steps": [
        {{
          "id": "step-unique-id",
          "day": 1,
          "time": "09:00",
          "title": "Activity title",
          "description": "Brief description (1-2 sentences)",
          "location": "Specific location name in {destination}",
          "duration": "2 hours",
          "category": "activity",
          "isBookable": true,
          "estimatedCost": 2000
        }}
      ]
    }}
  ]
}}

Categories must be: transport, accommodation, activity, food, sightseeing
Include 4-6 steps per day with realistic INR costs.
Each step must have a unique id (use format: itinerary-index-day-step, e.g., "1-d1-s1")."""
)

BUDGET_TIERS_BLOCK = """Since no budget was provided, generate 4 DISTINCT itineraries with different budget levels:
1. "Minimum Cost" - Backpacker style, hostels, street food, free attractions (~₹15,000-25,000)
2. "Economy" - Budget hotels, local restaurants, mix of paid/free activities (~₹30,000-50,000)
3. "Standard" - 3-star hotels, good restaurants, popular attractions (~₹60,000-90,000)
4. "Luxury" - Premium hotels, fine dining, exclusive experiences (~₹1,20,000+)

Each budget tier should have genuinely different experiences and accommodations."""

THEMES_BLOCK = PromptTemplate(
    input_variables=["count"],
    template="""Generate {count} DISTINCT itinerary options with different themes:
1. "Classic Explorer" - Popular attractions and must-see spots
2. "Hidden Gems" - Off-the-beaten-path experiences and local secrets
3. "Adventure Seeker" - Active and adventurous activities
4. "Relaxed Retreat" - Leisurely pace with comfort focus

Each itinerary should feel genuinely different, not just reordered activities."""
)

# ============================================
# Trip Plan (single itinerary) Prompt
# ============================================

TRIP_PLAN_PROMPT = PromptTemplate(
    input_variables=["num_days", "travelers", "origin", "destination", "budget",
                     "interests", "start_date", "end_date"],
    template="""Create a {num_days}-day trip itinerary for {travelers} traveler(s) traveling from {origin} to {destination}.
Departure city: {origin}
Destination: {destination}
Budget level: {budget}
Interests: {interests}
Travel dates: {start_date} to {end_date}

IMPORTANT: The first step should be the transport (flight/train/bus) FROM {origin} TO {destination}. Include specific departure station/airport in {origin} and arrival station/airport in {destination}.
The last step should be the return transport FROM {destination} TO {origin}.

Return a JSON object with this exact structure:
{{
  "title": "Trip title",
  "reason": "Brief reason why this is a great trip (1 sentence)",
  "steps": [
    {{
      "id": "unique-id-1",
      "day": 1,
      "time": "09:00",
      "title": "Activity title",
      "description": "Brief description of the activity",
      "location": "Specific location name",
      "coordinates": {{ "lat": 0.0, "lng": 0.0 }},
      "duration": "2 hours",
      "category": "activity",
      "isBookable": true,
      "estimatedCost": 2000
    }}
  ]
}}

Categories must be one of: transport, accommodation, activity, food, sightseeing
Include 4-6 steps per day. Use realistic costs in INR.
Make sure each step has a unique id."""
)


# ============================================
# Builders
# ============================================

def itinerary_count(request: ItineraryRequest) -> int:
    if request.generate_budget_options or request.generate_multiple:
        return 4
    return 1


def build_itinerary_prompts(request: ItineraryRequest) -> Tuple[str, str]:
    """Return (system_prompt, user_prompt) for an itinerary request"""
    budget = request.budget_text
    origin = request.current_location

    if request.trip_type == TripType.COMMUTE:
        user_prompt = COMMUTE_PROMPT.format(
            travelers=request.party_size,
            origin=origin or "Origin",
            origin_detail=origin or "Not specified",
            destination=request.destination,
            start_date=request.start_date,
            end_date=request.end_date,
            budget=budget or "Flexible - provide multiple options",
            options_block=COMMUTE_WITHIN_BUDGET_BLOCK if budget else COMMUTE_TIERS_BLOCK,
        )
        return ITINERARY_SYSTEM_PROMPT, user_prompt

    count = itinerary_count(request)
    if request.generate_budget_options and not budget:
        options_block = BUDGET_TIERS_BLOCK
    else:
        options_block = THEMES_BLOCK.format(count=count)

    transport_note = ""
    if origin:
        transport_note = (
            f"IMPORTANT: Include transport from {origin} to {request.destination} "
            f"as the first step and return transport as the last step."
        )

    user_prompt = TOURISM_PROMPT.format(
        count=count,
        travelers=request.party_size,
        route=f"traveling from {origin} to " if origin else "visiting ",
        departure_line=f"Departure: {origin}" if origin else "No departure city specified",
        destination=request.destination,
        start_date=request.start_date,
        end_date=request.end_date,
        trip_days=request.trip_days,
        budget=budget or "Not specified - generate options from minimum to luxury",
        interests=", ".join(request.interests),
        mode_description=PLANNER_MODE_DESCRIPTIONS.get(request.planner_mode, "balanced"),
        options_block=options_block,
        transport_note=transport_note,
    )
    return ITINERARY_SYSTEM_PROMPT, user_prompt


def build_trip_plan_prompts(request: TripPlanRequest) -> Tuple[str, str]:
    """Return (system_prompt, user_prompt) for a single trip plan"""
    user_prompt = TRIP_PLAN_PROMPT.format(
        num_days=request.num_days,
        travelers=request.travelers,
        origin=request.current_location,
        destination=request.destination,
        budget=request.budget,
        interests=", ".join(request.interests),
        start_date=request.start_date,
        end_date=request.end_date,
    )
    return TRIP_PLAN_SYSTEM_PROMPT, user_prompt
