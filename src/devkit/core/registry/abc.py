"""Windows registry lookup interface for RubyInstaller entries."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RegistryInstallation:
    """One version subkey found under a RubyInstaller registry key."""

    version: str
    install_location: str


class RuntimeRegistry(ABC):
    """Abstract interface for reading RubyInstaller registry keys.

    Implementations treat missing or unreadable keys as empty.
    """

    @abstractmethod
    def list_installations(self, key: str) -> list[RegistryInstallation]:
        """List version subkeys and their InstallLocation under key.

        Both the machine-wide and the per-user hives are searched, machine
        first.

        Args:
            key: Registry key path relative to the hive root,
                e.g. 'Software\\RubyInstaller\\MRI'

        Returns:
            Installations in registry enumeration order
        """
        ...
