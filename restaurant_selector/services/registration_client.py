"""HTTP client for the event registrations API."""

import logging
from typing import Any

import httpx

from restaurant_selector.config import get_config

logger = logging.getLogger(__name__)


class RegistrationClient:
    """Fetches the registrations listing from the remote endpoint."""

    def __init__(
        self,
        url: str | None = None,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Listing endpoint; defaults to the configured URL
            params: Query parameters; defaults to the configured listing query
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        config = get_config()
        self.url = url or config.registrations_url
        self.params = params if params is not None else config.query_params()
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.transport = transport

    def fetch(self) -> list[Any]:
        """Request the registrations listing.

        Returns:
            The ``result`` list from the response body, or an empty list on
            any network, HTTP status or decoding failure
        """
        logger.info(f"Fetching registrations from {self.url}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(self.url, params=self.params)
                response.raise_for_status()
                body = response.json()

        except httpx.TimeoutException:
            logger.exception("Registrations request timed out")
            return []
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Registrations API returned status {e.response.status_code}: "
                f"{e.response.reason_phrase}"
            )
            return []
        except httpx.HTTPError as e:
            logger.error(f"Error fetching registrations: {e}")
            return []
        except ValueError as e:
            logger.error(f"Invalid JSON from registrations API: {e}")
            return []

        result = body.get("result") if isinstance(body, dict) else None
        if not isinstance(result, list):
            logger.error("Registrations API response has no 'result' list")
            return []

        logger.info(f"Fetched {len(result)} registrations")
        return result
