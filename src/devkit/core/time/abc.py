"""Clock abstraction for testing.

This module provides an ABC for reading the current time so backup
timestamps can be pinned in tests.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local date and time."""
        ...
