"""Interface for interacting with FreeNAS datasets."""

from dataclasses import dataclass
from typing import Any, Dict

from freenas.common.errors import (
    NotFoundError,
    TransportError,
    TypeMismatchError,
    UnexpectedStatusError,
)
from freenas.common.resource import FreenasResource
from freenas.common.server import FreenasServer
from freenas.utils.common_utils import split_dataset_path
from freenas.utils.logging import logger


@dataclass
class Dataset(FreenasResource):
    """
    Representation of a FreeNAS dataset.

    A dataset is identified by its ``pool`` and its slash separated ``name``
    inside that pool. The capacity metrics are only populated by :meth:`get`.

    .. code:: python

        >>> server = freenas.get_server(url="", username="", password="")
        >>> dataset = freenas.Dataset(pool="tank", name="k8s/volumes")
        >>> dataset.get(server)
    """

    pool: str
    name: str
    mountpoint: str = ""
    comments: str = ""
    available: int = 0
    referenced: int = 0
    used: int = 0

    def __str__(self) -> str:
        """Get dataset path within the appliance."""
        return f"{self.pool}/{self.name}"

    def to_json(self) -> Dict[str, Any]:
        """Encode the dataset as an API record, skipping empty optional fields."""
        record: Dict[str, Any] = {"name": self.name, "pool": self.pool}
        if self.available:
            record["avail"] = self.available
        if self.mountpoint:
            record["mountpoint"] = self.mountpoint
        if self.referenced:
            record["refer"] = self.referenced
        if self.used:
            record["used"] = self.used
        if self.comments:
            record["comments"] = self.comments
        return record

    @classmethod
    def from_json(cls, record: Dict[str, Any]) -> "Dataset":
        """Decode an API record."""
        return cls(
            pool=record.get("pool") or "",
            name=record.get("name") or "",
            mountpoint=record.get("mountpoint") or "",
            comments=record.get("comments") or "",
            available=int(record.get("avail") or 0),
            referenced=int(record.get("refer") or 0),
            used=int(record.get("used") or 0),
        )

    def copy_from(self, source: FreenasResource) -> None:
        """Copy every field of another dataset into this one."""
        if not isinstance(source, Dataset):
            raise TypeMismatchError(
                f"Cannot copy, {type(source).__name__} is not a Dataset"
            )
        self.pool = source.pool
        self.name = source.name
        self.mountpoint = source.mountpoint
        self.comments = source.comments
        self.available = source.available
        self.referenced = source.referenced
        self.used = source.used

    def get(self, server: FreenasServer) -> None:
        """Refresh descriptive fields and metrics from the pool listing.

        ``pool`` and ``name`` are kept as given. Raises
        :class:`NotFoundError` when no dataset of the pool matches both.
        """
        records = server.dataset.list_datasets(self.pool)
        try:
            remotes = [Dataset.from_json(record) for record in records]
        except (AttributeError, TypeError, ValueError) as error:
            logger.warning(f"Malformed dataset listing of pool {self.pool}: {error}")
            raise TransportError(
                f"Could not decode datasets of pool {self.pool}", error
            ) from error

        for remote in remotes:
            if remote.pool == self.pool and remote.name == self.name:
                self.mountpoint = remote.mountpoint
                self.comments = remote.comments
                self.available = remote.available
                self.referenced = remote.referenced
                self.used = remote.used
                return

        raise NotFoundError(f"No dataset has been found: {self}")

    def create(self, server: FreenasServer) -> None:
        """Create the dataset under its parent path.

        The API addresses the parent through the endpoint and only takes the
        leaf in the body, so after success ``name`` holds just the leaf.
        """
        parent, leaf = split_dataset_path(self.name)
        record = self.to_json()
        record["name"] = leaf

        logger.debug(f"Creating dataset {leaf} under {self.pool}/{parent}")
        server.dataset.create_dataset(self.pool, parent, record)
        self.name = leaf

    def delete(self, server: FreenasServer) -> None:
        """Delete the dataset."""
        try:
            server.dataset.delete_dataset(self.pool, self.name)
        except UnexpectedStatusError as error:
            raise UnexpectedStatusError(
                f"Error deleting dataset {self!r} - {error.body}",
                error.status_code,
                error.body,
            ) from error
