import httpx
import pytest
from fastapi.testclient import TestClient

from itinerary_api.api import create_app
from itinerary_api.config import Settings
from itinerary_api.integrations.openai_client import ItineraryGenerator


def completion_body(content):
    """Minimal chat.completion payload as returned by the provider."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30},
    }


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test", openai_base_url="https://api.openai.com/v1")


@pytest.fixture
def make_generator(settings):
    def _make(handler):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ItineraryGenerator(settings, http_client=http_client)
    return _make


@pytest.fixture
def make_client(settings, make_generator):
    def _make(handler):
        return TestClient(create_app(settings, make_generator(handler)))
    return _make
