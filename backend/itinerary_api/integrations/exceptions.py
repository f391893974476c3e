GENERATION_FAILED_MESSAGE = "Failed to generate itinerary. Please try again."


class IntegrationError(Exception):
    """Base exception for integration-level failures (config, missing credentials)."""


class UpstreamAPIError(Exception):
    """Represents a completion provider failure (network, 4xx/5xx, malformed response)."""

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message
