"""FreeNAS storage appliance Python SDK."""

import os
from typing import Optional

from freenas.common.constants import (
    DEFAULT_URL,
    DEFAULT_USERNAME,
    PASSWORD_ENV_VAR,
    URL_ENV_VAR,
    USERNAME_ENV_VAR,
)
from freenas.common.errors import (
    FreenasError,
    NotFoundError,
    TransportError,
    TypeMismatchError,
    UnexpectedStatusError,
)
from freenas.common.resource import FreenasResource
from freenas.common.server import FreenasServer, FreenasServerImpl
from freenas.dataset import Dataset

from .config import config


__version__ = "1.0.0"


def version() -> str:
    """Return the current version."""
    return f"v{__version__}"


def get_server(
    username: str,
    password: str,
    url: str = DEFAULT_URL,
    verify_ssl: Optional[bool] = None,
) -> FreenasServer:
    """
    Get a FreeNAS server object.

    The server object hands out the authenticated HTTP connection used by
    every resource operation.

    >>> server = freenas.get_server("root", "secret", "https://nas.local")

    Parameters
    ---------------
    username: str
        Appliance user, usually root.

    password: str
        Password of the appliance user.

    url: str = DEFAULT_URL
        Base url of the appliance web interface.

    verify_ssl: Optional[bool] = None
        Override `config.verify_ssl` for this server.
    """
    return FreenasServerImpl(
        url=url, username=username, password=password, verify_ssl=verify_ssl
    )


def get_server_from_env() -> FreenasServer:
    """Get the server from the FREENAS_URL, FREENAS_USERNAME, FREENAS_PASSWORD env vars.

    >>> server = get_server_from_env()
    """
    password = os.environ.get(PASSWORD_ENV_VAR)
    if not password:
        raise FreenasError(f"{PASSWORD_ENV_VAR} is not set")
    return get_server(
        os.environ.get(USERNAME_ENV_VAR) or DEFAULT_USERNAME,
        password,
        os.environ.get(URL_ENV_VAR) or DEFAULT_URL,
    )


__all__ = [
    "__version__",
    "config",
    "version",
    "get_server",
    "get_server_from_env",
    "FreenasServer",
    "FreenasResource",
    "Dataset",
    "FreenasError",
    "NotFoundError",
    "TransportError",
    "TypeMismatchError",
    "UnexpectedStatusError",
]
