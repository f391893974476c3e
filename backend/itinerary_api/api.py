from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from itinerary_api.config import Settings, load_settings
from itinerary_api.integrations.exceptions import GENERATION_FAILED_MESSAGE, UpstreamAPIError
from itinerary_api.integrations.openai_client import ItineraryGenerator
from itinerary_api.models.itinerary_request import ItineraryRequest
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ItineraryResponse(BaseModel):
    itinerary: str


class ErrorResponse(BaseModel):
    error: str


def get_generator(request: Request) -> ItineraryGenerator:
    return request.app.state.generator


def create_app(settings: Optional[Settings] = None, generator: Optional[ItineraryGenerator] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Settings are loaded from the environment when not given; the generator is
    built from them unless one is injected (tests pass one with a mock transport).
    """
    if settings is None:
        settings = load_settings()
    if generator is None:
        generator = ItineraryGenerator(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await app.state.generator.aclose()

    app = FastAPI(
        title="Itinerary API",
        description="Day-by-day travel itineraries generated by an LLM from trip preferences",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.generator = generator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {
            "message": "Itinerary API",
            "version": "1.0.0",
            "endpoints": {
                "health": "/health",
                "generate_itinerary": "/generate-itinerary",
                "docs": "/docs"
            }
        }

    @app.get("/health")
    def health():
        return {"status": "healthy", "service": "Itinerary API"}

    @app.post(
        "/generate-itinerary",
        response_model=ItineraryResponse,
        responses={500: {"model": ErrorResponse}},
    )
    async def generate_itinerary(
        raw: Request,
        request: Optional[ItineraryRequest] = Body(default=None),
        generator: ItineraryGenerator = Depends(get_generator),
    ):
        """
        Generate a day-by-day itinerary from trip preferences.

        - **dateRange**: list with one `{startDate, endDate}` pair (YYYY-MM-DD)
        - **startTime**, **budget**, **adults**, **children**
        - **accommodationType**, **hotelRating**, **priceRange**
        - **interests**, **mustVisit**, **avoid**: lists of free text

        Every field is optional, as is the body itself; missing values are sent as "not specified".
        """
        raw_body = (await raw.body()).decode("utf-8", errors="replace")
        logger.info(f"Received request data: {raw_body or '{}'}")
        if request is None:
            request = ItineraryRequest()
        try:
            itinerary = await generator.generate(request)
        except UpstreamAPIError as e:
            logger.error(f"Error generating itinerary: {e.message}")
            return JSONResponse(status_code=500, content={"error": e.message})
        except Exception:
            logger.exception("Unexpected error generating itinerary")
            return JSONResponse(status_code=500, content={"error": GENERATION_FAILED_MESSAGE})
        return ItineraryResponse(itinerary=itinerary)

    return app
