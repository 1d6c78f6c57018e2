"""Handlers to access APIs for datasets."""

from typing import Dict, List

from freenas.common.client import FreenasClient
from freenas.common.constants import (
    API_PREFIX,
    DATASETS_LIST_LIMIT,
    HTTP_CREATED,
    HTTP_NO_CONTENT,
)
from freenas.common.dataset import DatasetRepo
from freenas.common.errors import TransportError, UnexpectedStatusError
from freenas.utils.common_utils import join_endpoint
from freenas.utils.logging import logger


class DatasetRepoImpl(DatasetRepo):
    """Class to manage interaction with dataset APIs."""

    def __init__(self, client: FreenasClient) -> None:
        """Construct DatasetRepoImpl."""
        self.client = client

    def list_datasets(self, pool: str) -> List[Dict]:
        """List the datasets of a pool.

        The server paginates at 20 entries by default, so the listing
        always asks for a single page of `DATASETS_LIST_LIMIT` entries.
        """
        endpoint = join_endpoint(API_PREFIX, "storage/volume", pool, "datasets")
        datasets = self.client.get_json(endpoint, params={"limit": DATASETS_LIST_LIMIT})
        if not isinstance(datasets, list):
            logger.warning(f"Unexpected datasets listing for pool {pool}: {datasets}")
            raise TransportError(f"Expected a list of datasets for pool {pool}")
        return datasets

    def create_dataset(self, pool: str, parent: str, record: Dict) -> None:
        """Create a dataset under a parent path."""
        endpoint = join_endpoint(API_PREFIX, "storage/dataset", pool, parent)
        response = self.client.post(endpoint, record)
        if response.status_code != HTTP_CREATED:
            raise UnexpectedStatusError(
                f"Error creating dataset - message: {response.text}, "
                + f"status: {response.status_code}",
                response.status_code,
                response.text,
            )

    def delete_dataset(self, pool: str, name: str) -> None:
        """Delete a dataset."""
        endpoint = join_endpoint(API_PREFIX, "storage/volume", pool, "datasets", name)
        response = self.client.delete(endpoint)
        if response.status_code != HTTP_NO_CONTENT:
            raise UnexpectedStatusError(
                f"Error deleting dataset {pool}/{name} - {response.text}",
                response.status_code,
                response.text,
            )
