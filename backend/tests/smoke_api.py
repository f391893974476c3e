#!/usr/bin/env python3
"""
Manual smoke test against a running Itinerary API.

Run locally: `python backend/run_server.py`, then `python backend/tests/smoke_api.py`
"""

import json
import os

import requests

BASE_URL = os.getenv("ITINERARY_API_URL", "http://localhost:5000")


def check_health():
    response = requests.get(f"{BASE_URL}/health")
    print(f"Health: {response.status_code} {response.json()}")


def check_generate_itinerary():
    trip_request = {
        "dateRange": [{"startDate": "2025-11-10", "endDate": "2025-11-13"}],
        "startTime": "08:00",
        "budget": 1500,
        "adults": 2,
        "children": 1,
        "accommodationType": "Hotel",
        "hotelRating": 4,
        "priceRange": 150,
        "interests": ["wildlife", "beaches", "tea plantations"],
        "mustVisit": ["Sigiriya"],
        "avoid": ["Colombo traffic"],
    }
    print(f"Request: {json.dumps(trip_request, indent=2)}")

    try:
        response = requests.post(f"{BASE_URL}/generate-itinerary", json=trip_request, timeout=120)
    except requests.exceptions.ConnectionError:
        print("Could not connect to the API server")
        print("Make sure the server is running: python backend/run_server.py")
        return

    print(f"Status: {response.status_code}")
    body = response.json()
    if response.status_code == 200:
        print(body["itinerary"])
    else:
        print(f"Error: {body.get('error')}")


if __name__ == "__main__":
    check_health()
    check_generate_itinerary()
