"""
Abeebus Network Client - HTTP client for the GeoIP lookup API

Every request is attempted exactly once: the session adapter is mounted
without retries and failures are mapped onto the Abeebus exception types.
"""

import logging
import time
from typing import Any, Dict, Optional
from urllib.parse import urljoin, urlparse

import requests
from requests.adapters import HTTPAdapter

from abeebus import __version__
from abeebus.core.exceptions import (
    APIError,
    NetworkError,
    DataParsingError,
)

logger = logging.getLogger(__name__)

class APIConfig:
    """Configuration for API client"""

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 100,
        verify_ssl: bool = True,
        user_agent: str = f"Abeebus/{__version__}",
    ):
        """
        Initialize API configuration

        Args:
            base_url: Base URL for API requests
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            user_agent: User agent string
        """
        self.base_url = base_url
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.user_agent = user_agent


class NetworkClient:
    """Synchronous HTTP client for making API requests"""

    def __init__(self, config: Optional[APIConfig] = None):
        """
        Initialize network client

        Args:
            config: API configuration
        """
        self.config = config or APIConfig()

        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

        adapter = HTTPAdapter(max_retries=0)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def __enter__(self):
        """Support context manager protocol"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close session when exiting context"""
        self.close()

    def close(self):
        """Close the session"""
        self.session.close()

    def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Perform a GET request and decode a JSON object

        Args:
            url: URL to request, relative to the base URL if one is set
            params: Query parameters
            headers: Additional headers

        Returns:
            Parsed JSON object

        Raises:
            NetworkError: For connection and timeout issues
            APIError: For API errors (4xx, 5xx)
            DataParsingError: If the body is not a JSON object
        """
        full_url = urljoin(self.config.base_url, url) if self.config.base_url else url
        service = self._get_service_name(full_url)

        try:
            start_time = time.time()
            response = self.session.get(
                full_url,
                params=params,
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
            elapsed = time.time() - start_time

            logger.debug(f"GET {full_url} completed in {elapsed:.3f}s with status {response.status_code}")

            response.raise_for_status()

        except requests.exceptions.Timeout as e:
            logger.debug(f"Request to {full_url} timed out after {self.config.timeout}s")
            raise NetworkError(f"Request timed out: {e}", service)

        except requests.exceptions.ConnectionError as e:
            logger.debug(f"Connection error for {full_url}: {e}")
            raise NetworkError(f"Connection error: {e}", service)

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.debug(f"HTTP error for {full_url}: {e} (status: {status_code})")
            raise APIError(service, f"HTTP error: {e}", status_code)

        except requests.exceptions.RequestException as e:
            logger.debug(f"Request error for {full_url}: {e}")
            raise NetworkError(f"Request failed: {e}", service)

        try:
            data = response.json()
        except ValueError as e:
            raise DataParsingError(f"Failed to parse JSON response: {e}", service)

        if not isinstance(data, dict):
            raise DataParsingError(f"Expected a JSON object, got {type(data).__name__}", service)
        return data

    def _get_service_name(self, url: str) -> str:
        """
        Extract service name from URL

        Args:
            url: URL to analyze

        Returns:
            Service name
        """
        domain = urlparse(url).netloc.split(':')[0]
        parts = domain.split('.')
        service = parts[0]
        if service in ('www', 'api') and len(parts) > 1:
            service = parts[1]
        return service.upper() or "API"
