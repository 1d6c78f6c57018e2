"""REST client responsible for making API requests."""

from abc import ABC, abstractmethod
import time
from typing import Any, Dict, Optional
import requests  # type: ignore

from freenas.common.constants import HTTP_OK, REQUEST_TIMEOUT
from freenas.common.errors import TransportError, UnexpectedStatusError
from freenas.config import config
from freenas.utils.logging import logger


class FreenasClient(ABC):
    """Client to communicate with a FreeNAS REST API."""

    url: str
    username: str

    @property
    @abstractmethod
    def headers(self) -> Dict:
        """Get request headers."""

    @abstractmethod
    def get(
        self, endpoint: str, params: Optional[Dict] = None
    ) -> requests.Response:
        """Send a GET request."""

    @abstractmethod
    def post(self, endpoint: str, body: Dict) -> requests.Response:
        """Send a POST request with a JSON body."""

    @abstractmethod
    def delete(self, endpoint: str) -> requests.Response:
        """Send a DELETE request."""

    @abstractmethod
    def get_json(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        """Send a GET request and decode a successful JSON response."""


class FreenasClientImpl(FreenasClient):
    """Client to communicate with a FreeNAS REST API."""

    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        verify_ssl: Optional[bool] = None,
    ) -> None:
        """Construct FreenasClient."""
        self.url = url.rstrip("/")
        self.username = username
        self.verify_ssl = verify_ssl

        self.session = requests.Session()
        self.session.auth = (username, password)

    def __del__(self) -> None:
        """Garbage collect and close session."""
        self.session.close()

    @property
    def headers(self) -> Dict:
        """Get request headers."""
        return {
            "FreeNAS-SDK-Version": config.version,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def get(
        self, endpoint: str, params: Optional[Dict] = None
    ) -> requests.Response:
        """Send a GET request."""
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, body: Dict) -> requests.Response:
        """Send a POST request with a JSON body."""
        return self._request("POST", endpoint, json=body)

    def delete(self, endpoint: str) -> requests.Response:
        """Send a DELETE request."""
        return self._request("DELETE", endpoint)

    def get_json(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        """Send a GET request and decode a successful JSON response."""
        response = self.get(endpoint, params=params)
        if response.status_code != HTTP_OK:
            raise UnexpectedStatusError(
                f"Error fetching {endpoint} - message: {response.text}, "
                + f"status: {response.status_code}",
                response.status_code,
                response.text,
            )
        try:
            return response.json()
        except ValueError as error:
            logger.warning(f"Invalid JSON response from {endpoint}: {error}")
            raise TransportError(
                f"Could not decode response from {endpoint}", error
            ) from error

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> requests.Response:
        start_time = time.time()
        logger.debug(f"{method} {endpoint}")
        try:
            response = self.session.request(
                method,
                self.url + endpoint,
                headers=self.headers,
                timeout=REQUEST_TIMEOUT,
                verify=config.verify_ssl if self.verify_ssl is None else self.verify_ssl,
                **kwargs,
            )
        except requests.RequestException as error:
            logger.warning(f"{method} {endpoint} failed: {error}")
            raise TransportError(f"{method} {endpoint} failed", error) from error

        total_time = time.time() - start_time
        logger.debug(
            f"Response status: {response.status_code} took {total_time} seconds"
        )
        return response
