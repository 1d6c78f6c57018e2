"""Interface for the raw dataset APIs."""

from typing import Dict, List
from abc import ABC, abstractmethod


class DatasetRepo(ABC):
    """Abstract interface to Dataset APIs."""

    @abstractmethod
    def list_datasets(self, pool: str) -> List[Dict]:
        """List the datasets of a pool."""

    @abstractmethod
    def create_dataset(self, pool: str, parent: str, record: Dict) -> None:
        """Create a dataset under a parent path."""

    @abstractmethod
    def delete_dataset(self, pool: str, name: str) -> None:
        """Delete a dataset."""
