# itinerary_api/models/itinerary_request.py
import math
from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _calendar_date(value: Any) -> Optional[date]:
    """Parse a calendar date; datetimes keep the date as written (no tz shift)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _whole_number(value: Any) -> Optional[int]:
    number = _number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _text_list(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        items = [_text(v) for v in value]
        return [item for item in items if item]
    single = _text(value)
    return [single] if single else []


class DateRange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _lenient_date(cls, value):
        return _calendar_date(value)


class ItineraryRequest(BaseModel):
    """Trip preferences posted by the client. Every field is optional.

    Values that cannot be coerced are dropped to "absent" instead of failing
    the request, so they show up as "not specified" in the prompt.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    date_range: Optional[List[DateRange]] = Field(default=None, alias="dateRange")
    start_time: Optional[str] = Field(default=None, alias="startTime")
    budget: Optional[float] = None
    adults: Optional[int] = None
    children: Optional[int] = None
    accommodation_type: Optional[str] = Field(default=None, alias="accommodationType")
    hotel_rating: Optional[float] = Field(default=None, alias="hotelRating")
    price_range: Optional[float] = Field(default=None, alias="priceRange")
    interests: List[str] = Field(default_factory=list)
    must_visit: List[str] = Field(default_factory=list, alias="mustVisit")
    avoid: List[str] = Field(default_factory=list)

    @field_validator("date_range", mode="before")
    @classmethod
    def _lenient_range(cls, value):
        if isinstance(value, dict):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return None
        ranges = [r for r in value if isinstance(r, (dict, DateRange))]
        return ranges or None

    @field_validator("start_time", "accommodation_type", mode="before")
    @classmethod
    def _lenient_text(cls, value):
        return _text(value)

    @field_validator("budget", "hotel_rating", "price_range", mode="before")
    @classmethod
    def _lenient_number(cls, value):
        return _number(value)

    @field_validator("adults", "children", mode="before")
    @classmethod
    def _lenient_count(cls, value):
        return _whole_number(value)

    @field_validator("interests", "must_visit", "avoid", mode="before")
    @classmethod
    def _lenient_list(cls, value):
        return _text_list(value)

    @property
    def trip_dates(self) -> Optional[DateRange]:
        """The first supplied date range, which is the only one used."""
        return self.date_range[0] if self.date_range else None
