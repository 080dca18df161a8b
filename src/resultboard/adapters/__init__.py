"""Adapters - I/O implementations of ports."""

from .file_store import FileResultStore
from .http_store import HttpResultStore

__all__ = [
    "FileResultStore",
    "HttpResultStore",
]
