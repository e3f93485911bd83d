"""Classification of Ruby installation layouts.

Decides, from the directory structure alone, where DevKit helpers belong in
an installation root:

- StubLayout: RubyGems is not installed, so compiler stubs go into bin/
- OverrideLayout: RubyGems is installed, so an operating_system.rb override
  goes into each matched rubygems folder
"""

from dataclasses import dataclass
from pathlib import Path

from devkit.core.filesystem.abc import FileSystem

SITE_RUBYGEMS_PATTERN = "lib/ruby/site_ruby/**/rubygems"
CORE_RUBYGEMS_PATTERN = "lib/ruby/**/rubygems"
SITE_RUBY_DIR = Path("lib", "ruby", "site_ruby")
JRUBY_LAUNCHER = Path("bin", "jruby.bat")


@dataclass(frozen=True)
class StubLayout:
    """RubyGems absent: install command stubs into the root's bin directory."""

    root: Path

    @property
    def bin_dir(self) -> Path:
        return self.root / "bin"


@dataclass(frozen=True)
class OverrideLayout:
    """RubyGems present: install the override into each folder."""

    root: Path
    folders: tuple[Path, ...]


Layout = StubLayout | OverrideLayout


def classify_layout(root: Path, filesystem: FileSystem) -> Layout:
    """Probe root for RubyGems and pick the integration strategy.

    Site-level RubyGems folders take priority: when any exist, only they are
    returned; otherwise the core-level matches are used.

    Args:
        root: Absolute installation root (must be an existing directory)
        filesystem: Filesystem used for probing

    Returns:
        StubLayout when no RubyGems folder exists, else OverrideLayout
    """
    site_rubygems = filesystem.glob_dirs(root, SITE_RUBYGEMS_PATTERN)
    core_rubygems = filesystem.glob_dirs(root, CORE_RUBYGEMS_PATTERN)

    if not site_rubygems and not core_rubygems:
        return StubLayout(root=root)

    folders = site_rubygems if site_rubygems else core_rubygems
    return OverrideLayout(root=root, folders=tuple(folders))


def helper_library_dir(root: Path, filesystem: FileSystem) -> Path:
    """Return the directory devkit.rb is written into.

    This is site_ruby, except for JRuby installs (recognized by their
    bin/jruby.bat launcher) that keep their load path in site_ruby/shared.
    """
    site_ruby = root / SITE_RUBY_DIR
    jruby_shared = site_ruby / "shared"
    if filesystem.is_dir(jruby_shared) and filesystem.exists(root / JRUBY_LAUNCHER):
        return jruby_shared
    return site_ruby
