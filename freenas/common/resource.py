"""Capability interface shared by every FreeNAS resource."""

from abc import ABC, abstractmethod

from freenas.common.server import FreenasServer


class FreenasResource(ABC):
    """A local projection of a resource living on a FreeNAS appliance.

    Instances hold no cached state; each operation queries the server.
    """

    @abstractmethod
    def get(self, server: FreenasServer) -> None:
        """Refresh the resource from the server."""

    @abstractmethod
    def create(self, server: FreenasServer) -> None:
        """Create the resource on the server."""

    @abstractmethod
    def delete(self, server: FreenasServer) -> None:
        """Delete the resource from the server."""

    @abstractmethod
    def copy_from(self, source: "FreenasResource") -> None:
        """Copy all fields from a resource of the same type."""
