"""Common utility functions."""

import posixpath
from typing import Tuple


def split_dataset_path(path: str) -> Tuple[str, str]:
    """Split a dataset path into its parent path and leaf name.

    >>> split_dataset_path("a/b/c")
    ('a/b', 'c')
    >>> split_dataset_path("c")
    ('', 'c')
    """
    parent, leaf = posixpath.split(path)
    return parent.strip("/"), leaf


def join_endpoint(*parts: str) -> str:
    """Join url path segments into an absolute endpoint with a trailing slash."""
    segments = [part.strip("/") for part in parts if part and part.strip("/")]
    return "/" + "/".join(segments) + "/"
