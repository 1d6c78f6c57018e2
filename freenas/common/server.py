"""Container for low-level methods to communicate with a FreeNAS appliance."""

from abc import ABC, abstractmethod
from typing import Optional

from freenas.common.client import FreenasClient, FreenasClientImpl
from freenas.common.dataset import DatasetRepo
from freenas.config import config
from freenas.utils.logging import logger


class FreenasServer(ABC):
    """Connection details and API handles for a FreeNAS appliance."""

    url: str
    username: str

    dataset: DatasetRepo

    @abstractmethod
    def get_connection(self) -> FreenasClient:
        """Get the configured HTTP client bound to this server."""


class FreenasServerImpl(FreenasServer):
    """Connection details and API handles for a FreeNAS appliance."""

    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        verify_ssl: Optional[bool] = None,
    ) -> None:
        """Construct FreenasServer."""
        # pylint: disable=import-outside-toplevel, cyclic-import
        from freenas.repo import DatasetRepoImpl

        if config.debug:
            logger.debug(f"Using: freenas-sdk=={config.version}")

        url = url.strip().rstrip("/")
        if "://" not in url:
            url = "http://" + url
        self.url = url
        self.username = username
        self._password = password
        self._verify_ssl = verify_ssl
        self._client: Optional[FreenasClient] = None

        self.dataset = DatasetRepoImpl(self.get_connection())

    def __str__(self) -> str:
        """Get string representation."""
        return f"{self.username}:***@{self.url}"

    def get_connection(self) -> FreenasClient:
        """Get the configured HTTP client bound to this server."""
        if self._client is None:
            self._client = FreenasClientImpl(
                url=self.url,
                username=self.username,
                password=self._password,
                verify_ssl=self._verify_ssl,
            )
        return self._client
