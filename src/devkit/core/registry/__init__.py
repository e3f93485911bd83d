"""Registry lookup subpackage."""

from devkit.core.registry.abc import RegistryInstallation, RuntimeRegistry
from devkit.core.registry.real import WindowsRuntimeRegistry

__all__ = ["RegistryInstallation", "RuntimeRegistry", "WindowsRuntimeRegistry"]
