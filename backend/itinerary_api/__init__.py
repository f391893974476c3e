"""Itinerary API: LLM-generated travel itineraries over HTTP."""

__version__ = "1.0.0"
