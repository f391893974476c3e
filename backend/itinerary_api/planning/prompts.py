from datetime import date
from typing import List, Optional, Union

from itinerary_api.models.itinerary_request import ItineraryRequest

NOT_SPECIFIED = "not specified"
NONE_SPECIFIED = "none specified"
DEFAULT_FOCUS = "a balanced mix of cultural and natural experiences"

# Lower bound quoted in the price range line; the client only sends the ceiling.
PRICE_RANGE_FLOOR = 18

SYSTEM_PROMPT = "You are a helpful travel assistant."

ITINERARY_PROMPT = """You are an expert travel assistant specializing in Sri Lanka travel itineraries. Create a detailed, day-by-day itinerary covering a {total_days}-day trip that includes the following sections:

Each Day should include:
  - **Destination Name**: Provide an introduction to the destination in Sri Lanka, highlighting cultural, historical, and natural significance.
  - **Best Time to Visit**: Suggest the optimal times to visit for the best experience, such as early morning or late afternoon to avoid heat and crowds.
  - **Clothing Recommendations**: Include appropriate clothing advice like breathable clothing, sun protection, good walking shoes, and any considerations for temple visits (modesty required).

User Details:
- Travel Dates: {travel_dates}
- Start Time: {start_time}
- Budget: ${budget}
- Adults: {adults}
- Children: {children}
- Accommodation Type: {accommodation_type}
- Hotel Rating: {hotel_rating}
- Price Range: ${price_floor} - ${price_range}
- Interests: {interests}
- Must-Visit Places: {must_visit}
- Places to Avoid: {avoid}

Generate a unique itinerary plan for each of the {total_days} days, focusing on {focus}. Provide detailed experiences each day, based on the user's interests and must-visit places, ensuring the trip is well-paced."""


def _or_placeholder(value: Optional[Union[str, int, float, date]]) -> str:
    if value is None:
        return NOT_SPECIFIED
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _joined(items: List[str], placeholder: str) -> str:
    return ", ".join(items) if items else placeholder


def _travel_dates(request: ItineraryRequest) -> str:
    dates = request.trip_dates
    if dates is None:
        return NOT_SPECIFIED
    return f"{_or_placeholder(dates.start_date)} to {_or_placeholder(dates.end_date)}"


def build_prompt(request: ItineraryRequest, total_days: int) -> str:
    """Render the user prompt for the itinerary completion."""
    return ITINERARY_PROMPT.format(
        total_days=total_days,
        travel_dates=_travel_dates(request),
        start_time=_or_placeholder(request.start_time),
        budget=_or_placeholder(request.budget),
        adults=_or_placeholder(request.adults),
        children=_or_placeholder(request.children),
        accommodation_type=_or_placeholder(request.accommodation_type),
        hotel_rating=_or_placeholder(request.hotel_rating),
        price_floor=PRICE_RANGE_FLOOR,
        price_range=_or_placeholder(request.price_range),
        interests=_joined(request.interests, NONE_SPECIFIED),
        must_visit=_joined(request.must_visit, NOT_SPECIFIED),
        avoid=_joined(request.avoid, NOT_SPECIFIED),
        focus=_joined(request.interests, DEFAULT_FOCUS),
    )
