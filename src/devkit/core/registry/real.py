"""Production registry lookup using winreg."""

import logging
import sys

from devkit.core.registry.abc import RegistryInstallation, RuntimeRegistry

logger = logging.getLogger(__name__)


class WindowsRuntimeRegistry(RuntimeRegistry):
    """Reads RubyInstaller entries from HKEY_LOCAL_MACHINE and HKEY_CURRENT_USER."""

    def list_installations(self, key: str) -> list[RegistryInstallation]:
        if sys.platform != "win32":
            logger.debug("Registry lookup of %s skipped on %s", key, sys.platform)
            return []

        import winreg

        installations: list[RegistryInstallation] = []
        for hive in (winreg.HKEY_LOCAL_MACHINE, winreg.HKEY_CURRENT_USER):
            try:
                with winreg.OpenKey(hive, key) as parent:
                    subkey_count = winreg.QueryInfoKey(parent)[0]
                    for index in range(subkey_count):
                        subkey = winreg.EnumKey(parent, index)
                        location = _read_install_location(parent, subkey)
                        if location is None:
                            continue
                        installations.append(
                            RegistryInstallation(version=subkey, install_location=location)
                        )
            except OSError as e:
                logger.debug("Registry key %s unreadable in hive %s: %s", key, hive, e)
                continue
        return installations


def _read_install_location(parent, subkey: str) -> str | None:
    """Read InstallLocation from a subkey, or None if absent or unreadable."""
    import winreg

    try:
        with winreg.OpenKey(parent, subkey) as version_key:
            location, _ = winreg.QueryValueEx(version_key, "InstallLocation")
    except OSError:
        logger.debug("No InstallLocation under subkey %s", subkey)
        return None
    return str(location)
