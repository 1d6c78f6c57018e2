"""Initialize repo module."""

from .dataset import DatasetRepoImpl
