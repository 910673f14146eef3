"""Common utilities."""

from .filesystem import DirEntry, FileSystem, MemoryFileSystem, OsFileSystem
from .logger import setup_logging

__all__ = ["DirEntry", "FileSystem", "MemoryFileSystem", "OsFileSystem", "setup_logging"]
