"""Filesystem operations subpackage.

Provides an abstraction over the file operations performed inside Ruby
installation trees, with a pathlib-backed production implementation.
"""

from devkit.core.filesystem.abc import FileSystem
from devkit.core.filesystem.real import RealFileSystem

__all__ = ["FileSystem", "RealFileSystem"]
