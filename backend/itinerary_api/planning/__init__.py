"""
Planning helpers for the Itinerary API.

Pure functions that turn an ItineraryRequest into the prompt sent to the
completion provider.
"""

from .dates import calculate_days
from .prompts import (
    NOT_SPECIFIED,
    NONE_SPECIFIED,
    SYSTEM_PROMPT,
    build_prompt,
)

__all__ = [
    'calculate_days',
    'build_prompt',
    'NOT_SPECIFIED',
    'NONE_SPECIFIED',
    'SYSTEM_PROMPT',
]
