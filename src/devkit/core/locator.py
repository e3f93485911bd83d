"""Discovery of installed Rubies via RubyInstaller registry keys."""

import logging
import re

from devkit.core.registry.abc import RuntimeRegistry
from devkit.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

# TODO add the JRuby installer registry key once its layout is known
RUBY_REGISTRY_KEYS = (
    "Software\\RubyInstaller\\MRI",
    "Software\\RubyInstaller\\Rubinius",
)

_VERSION_SUBKEY = re.compile(r"\d\.\d\.\d")


def normalize_install_location(location: str) -> str:
    """Convert a registry InstallLocation to a forward-slash path string."""
    return location.replace("\\", "/")


def locate_installed_runtimes(
    registry: RuntimeRegistry,
    feedback: UserFeedback,
    keys: tuple[str, ...] = RUBY_REGISTRY_KEYS,
) -> list[str]:
    """Return the root directories of every RubyInstaller-registered Ruby.

    Only subkeys whose name contains a version number (e.g. '1.9.2') are
    considered. Duplicates across keys and hives are dropped, keeping the
    first occurrence.

    Args:
        registry: Registry lookup implementation
        feedback: Where to report each discovered installation
        keys: Registry keys to search

    Returns:
        Installation roots with '/' separators, in discovery order
    """
    roots: list[str] = []
    for key in keys:
        for installation in registry.list_installations(key):
            if not _VERSION_SUBKEY.search(installation.version):
                logger.debug("Ignoring non-version subkey %s under %s", installation.version, key)
                continue
            root = normalize_install_location(installation.install_location)
            feedback.info(f"Found RubyInstaller v{installation.version} at {root}")
            if root not in roots:
                roots.append(root)
    return roots
