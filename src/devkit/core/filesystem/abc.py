"""Filesystem operations interface.

This module provides a narrow abstraction over the handful of filesystem
operations the injector performs inside third-party installation trees, so
layout probing and conflict policy can be tested without touching disk.

Architecture:
- FileSystem: Abstract base class defining the interface
- RealFileSystem: Production implementation using pathlib
- FakeFileSystem (tests/fakes): In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path


class FileSystem(ABC):
    """Abstract interface for filesystem operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Return True if path exists and is a directory."""
        ...

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True if a file or directory exists at path."""
        ...

    @abstractmethod
    def glob_dirs(self, root: Path, pattern: str) -> list[Path]:
        """Find directories under root matching a glob pattern.

        Args:
            root: Directory the pattern is relative to
            pattern: Glob pattern using '/' separators; '**' matches zero or
                more directory levels

        Returns:
            Sorted list of matching directories (files are never returned)
        """
        ...

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create path and any missing parents. No-op if it already exists."""
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a file as UTF-8 text.

        Bytes that are not valid UTF-8 must not raise; they are decoded with
        the surrogateescape error handler.
        """
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Create or truncate a file and write content to it."""
        ...

    @abstractmethod
    def append_text(self, path: Path, content: str) -> None:
        """Append content to the end of an existing file."""
        ...

    @abstractmethod
    def rename(self, source: Path, target: Path) -> None:
        """Rename source to target. Target must not exist."""
        ...
