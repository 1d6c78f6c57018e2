"""Errors raised while talking to a FreeNAS appliance."""

from typing import Optional


class FreenasError(Exception):
    """Base class for all freenas sdk errors."""


class NotFoundError(FreenasError, LookupError):
    """Requested resource is not present on the server."""


class TransportError(FreenasError, ConnectionError):
    """Request could not be sent or its response could not be decoded."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Construct TransportError."""
        super().__init__(message)
        self.cause = cause


class UnexpectedStatusError(FreenasError):
    """Server answered with a status other than the documented success code."""

    def __init__(self, message: str, status_code: int, body: str) -> None:
        """Construct UnexpectedStatusError."""
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TypeMismatchError(FreenasError, TypeError):
    """Resource cannot be copied from a different resource type."""
