"""
Map Reference: Metadata and image downloads from the map server.
Purpose: Wrap network calls with retry/back-off for robustness.
Dependencies: requests, time, logging.
Ext Hooks: Add authentication, caching.
Client Only: HTTP client with resilience.
"""

import logging
import requests
import time
from typing import Any, Dict
from core.config import REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a resource could not be fetched after all retries."""


class NetworkClient:
    def __init__(self, base_url: str, max_retries: int = 3, retry_delay: float = 1.0, backoff_factor: float = 2.0):
        self.base_url = base_url.rstrip('/')
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.backoff_factor = backoff_factor

    def _get_with_retry(self, endpoint: str, timeout: float) -> requests.Response:
        url = f"{self.base_url}{endpoint}"
        delay = self.retry_delay
        last_error = None
        for attempt in range(self.max_retries):
            try:
                response = requests.get(url, timeout=timeout)
                if response.status_code == 200:
                    return response
                last_error = f"HTTP {response.status_code}"
                logger.warning("Server error %s for %s on attempt %d", response.status_code, url, attempt + 1)
            except requests.exceptions.RequestException as e:
                last_error = str(e)
                logger.warning("Network error for %s on attempt %d: %s", url, attempt + 1, e)

            if attempt < self.max_retries - 1:
                logger.info("Retrying in %s seconds...", delay)
                time.sleep(delay)
                delay *= self.backoff_factor
        raise FetchError(f"GET {url} failed after {self.max_retries} attempts: {last_error}")

    def get_json_with_retry(self, endpoint: str, timeout: float = REQUEST_TIMEOUT) -> Dict[str, Any]:
        """GET a JSON document with exponential backoff retry."""
        return self._get_with_retry(endpoint, timeout).json()

    def get_bytes_with_retry(self, endpoint: str, timeout: float = REQUEST_TIMEOUT) -> bytes:
        """GET a binary resource with exponential backoff retry."""
        return self._get_with_retry(endpoint, timeout).content

# Usage: client = NetworkClient(SERVER_URL)
# metadata = client.get_json_with_retry("/api/metadata")
