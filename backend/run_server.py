#!/usr/bin/env python3
"""
FastAPI server runner for the Itinerary API
"""

import logging
import sys

import uvicorn
from itinerary_api.api import create_app
from itinerary_api.config import load_settings
from itinerary_api.integrations.exceptions import IntegrationError

logger = logging.getLogger(__name__)


def main():
    # Fail before binding a port when the API key is missing
    try:
        settings = load_settings()
    except IntegrationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    app = create_app(settings)
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
