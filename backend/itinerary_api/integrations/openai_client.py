import logging
from typing import Optional

import httpx
from openai import APIStatusError, AsyncOpenAI, OpenAIError

from itinerary_api.config import Settings
from itinerary_api.integrations.exceptions import UpstreamAPIError
from itinerary_api.models.itinerary_request import ItineraryRequest
from itinerary_api.planning import SYSTEM_PROMPT, build_prompt, calculate_days

logger = logging.getLogger(__name__)

MODEL = "gpt-3.5-turbo"
MAX_TOKENS = 1500
TEMPERATURE = 0.7


class ItineraryGenerator:
    """Turns an ItineraryRequest into generated itinerary text, one completion call per request."""

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        # max_retries=0: a single attempt per request
        self.client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            max_retries=0,
            http_client=http_client,
        )

    async def generate(self, request: ItineraryRequest) -> str:
        total_days = calculate_days(request.trip_dates)
        prompt = build_prompt(request, total_days)

        try:
            resp = await self.client.chat.completions.create(
                model=MODEL,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
            )
        except APIStatusError as e:
            logger.error(f"Error calling OpenAI API: {e.status_code} {e.response.text}")
            raise UpstreamAPIError() from e
        except (OpenAIError, ValueError) as e:
            logger.error(f"Error calling OpenAI API: {e}")
            raise UpstreamAPIError() from e

        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            logger.error(f"Malformed OpenAI response: {e}")
            raise UpstreamAPIError() from e
        if content is None:
            logger.error("Malformed OpenAI response: completion has no content")
            raise UpstreamAPIError()
        return content

    async def aclose(self) -> None:
        await self.client.close()
