"""HTTP client for a running hexworld server."""

import logging
import time
from typing import Iterable, Optional

import httpx
from pydantic import TypeAdapter

from hexworld import config
from hexworld.api import LOCATION_ENDPOINT
from hexworld.schemas import HexCoord, Location

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
RETRY_DELAY = 0.5

_LOCATIONS = TypeAdapter(list[Location])


class LocationClient:
    """Fetches locations in batches.

    Requests are idempotent, so server errors and timeouts are retried.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        retry_delay: float = RETRY_DELAY,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url or config.API_URL
        self.retry_delay = retry_delay
        self.client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def _post_locations(self, payload: list[dict]) -> httpx.Response:
        """POST a batch with retries."""
        last_error = None
        for attempt in range(MAX_RETRIES):
            try:
                response = self.client.post(LOCATION_ENDPOINT, json=payload)
                response.raise_for_status()
                return response
            except httpx.HTTPStatusError as e:
                if e.response.status_code < 500:
                    raise
                last_error = e
                reason = f"Server error {e.response.status_code}"
            except httpx.TimeoutException as e:
                last_error = e
                reason = "Timeout"

            if attempt < MAX_RETRIES - 1:
                wait_time = self.retry_delay * (attempt + 1)
                logger.warning(f"{reason}, waiting {wait_time}s...")
                time.sleep(wait_time)

        raise RuntimeError(f"Failed after {MAX_RETRIES} attempts: {last_error}")

    def get_locations(self, coords: Iterable[HexCoord]) -> list[Location]:
        """Fetch the locations for ``coords`` in request order."""
        payload = [coord.model_dump(by_alias=True) for coord in coords]
        response = self._post_locations(payload)
        return _LOCATIONS.validate_python(response.json())

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
