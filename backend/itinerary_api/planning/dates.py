from typing import Optional

from itinerary_api.models.itinerary_request import DateRange


def calculate_days(date_range: Optional[DateRange]) -> int:
    """
    Number of calendar days a trip spans, counting both endpoints.

    Order does not matter (absolute difference); a same-day trip is 1 day.
    Returns 0 when no range, or only half of one, was supplied.
    """
    if date_range is None:
        return 0
    if date_range.start_date is None or date_range.end_date is None:
        return 0
    return abs((date_range.end_date - date_range.start_date).days) + 1
