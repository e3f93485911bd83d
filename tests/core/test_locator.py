"""Tests for RubyInstaller registry discovery."""

from devkit.core.locator import (
    RUBY_REGISTRY_KEYS,
    locate_installed_runtimes,
    normalize_install_location,
)
from devkit.core.registry.abc import RegistryInstallation
from tests.fakes.registry import FakeRuntimeRegistry
from tests.fakes.user_feedback import FakeUserFeedback

MRI = "Software\\RubyInstaller\\MRI"
RUBINIUS = "Software\\RubyInstaller\\Rubinius"


def test_searches_mri_and_rubinius_keys() -> None:
    registry = FakeRuntimeRegistry()

    roots = locate_installed_runtimes(registry, FakeUserFeedback())

    assert roots == []
    assert registry.queried_keys == list(RUBY_REGISTRY_KEYS) == [MRI, RUBINIUS]


def test_install_locations_use_forward_slashes() -> None:
    assert normalize_install_location("C:\\Ruby192\\") == "C:/Ruby192/"


def test_version_subkeys_are_reported_in_order() -> None:
    registry = FakeRuntimeRegistry(
        keys={
            MRI: [
                RegistryInstallation("1.8.7", "C:\\Ruby187"),
                RegistryInstallation("1.9.2", "C:\\Ruby192"),
            ],
            RUBINIUS: [RegistryInstallation("1.0.1", "D:\\rbx")],
        }
    )
    feedback = FakeUserFeedback()

    roots = locate_installed_runtimes(registry, feedback)

    assert roots == ["C:/Ruby187", "C:/Ruby192", "D:/rbx"]
    assert feedback.infos == [
        "Found RubyInstaller v1.8.7 at C:/Ruby187",
        "Found RubyInstaller v1.9.2 at C:/Ruby192",
        "Found RubyInstaller v1.0.1 at D:/rbx",
    ]


def test_non_version_subkeys_are_ignored() -> None:
    registry = FakeRuntimeRegistry(
        keys={
            MRI: [
                RegistryInstallation("Settings", "C:\\Elsewhere"),
                RegistryInstallation("1.9.2-p0", "C:\\Ruby192"),
            ]
        }
    )

    roots = locate_installed_runtimes(registry, FakeUserFeedback())

    assert roots == ["C:/Ruby192"]


def test_duplicate_roots_are_dropped() -> None:
    """The same Ruby registered in both hives is listed once."""
    registry = FakeRuntimeRegistry(
        keys={
            MRI: [
                RegistryInstallation("1.9.2", "C:\\Ruby192"),
                RegistryInstallation("1.9.2", "C:/Ruby192"),
            ]
        }
    )

    roots = locate_installed_runtimes(registry, FakeUserFeedback())

    assert roots == ["C:/Ruby192"]
