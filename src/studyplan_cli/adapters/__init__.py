"""Adapters module - Repository implementations for different storage backends.

- flatfile: Local pipe-delimited record file
"""

from .flatfile import FlatFileTaskRepository

__all__ = ["FlatFileTaskRepository"]
