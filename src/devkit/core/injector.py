"""Injection of DevKit helpers into Ruby installation roots.

For every planned root this module:
1. Classifies the layout (see devkit.core.layout)
2. Installs compiler stubs or the RubyGems override accordingly
3. Installs the devkit.rb helper library

Existing files are never silently destroyed. Anything replaced is first
renamed to '<file>.<timestamp>', using one timestamp for the whole run.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from devkit.core.context import DevKitContext
from devkit.core.layout import (
    Layout,
    OverrideLayout,
    StubLayout,
    classify_layout,
    helper_library_dir,
)
from devkit.core.markers import DEVKIT_MARKER, ContentMarker
from devkit.core.plan_store import resolve_plan_entry
from devkit.core.templates import (
    STUB_COMMANDS,
    render_gem_override,
    render_helper_library,
    render_stub,
)

logger = logging.getLogger(__name__)

OVERRIDE_FILE_NAME = "operating_system.rb"
HELPER_LIBRARY_NAME = "devkit.rb"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

OVERRIDE_REPLACED_NOTICE = """
=== IMPORTANT ===
A backup of the original override file has been created. As the
original may have contained important non-DevKit behavior, please
review both and modify the new file to include any previously
existing functionality from the original.
"""


class ArtifactAction(Enum):
    """What happened to a single helper file."""

    CREATED = "created"
    APPENDED = "appended"
    REPLACED = "replaced"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ArtifactResult:
    path: Path
    action: ArtifactAction
    backup: Path | None = None


@dataclass(frozen=True)
class InstallOptions:
    """Settings shared by every root in one install run."""

    force: bool
    timestamp: str


@dataclass(frozen=True)
class RootResult:
    """Outcome of injecting into one installation root.

    layout is None when the root was skipped before classification.
    """

    root: Path
    layout: Layout | None
    artifacts: tuple[ArtifactResult, ...]
    error: str | None = None


@dataclass(frozen=True)
class InstallReport:
    roots: tuple[RootResult, ...]

    @property
    def failed(self) -> tuple[RootResult, ...]:
        return tuple(result for result in self.roots if result.error is not None)


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def backup_file(ctx: DevKitContext, target: Path, timestamp: str) -> Path:
    """Rename target to '<target>.<timestamp>' and return the backup path.

    If that name is already taken (two forced runs within the same second),
    a counter is appended so no earlier backup is overwritten.
    """
    backup = target.with_name(f"{target.name}.{timestamp}")
    counter = 1
    while ctx.filesystem.exists(backup):
        backup = target.with_name(f"{target.name}.{timestamp}.{counter}")
        counter += 1
    ctx.filesystem.rename(target, backup)
    logger.debug("Backed up %s to %s", target, backup)
    return backup


def install_stubs(
    ctx: DevKitContext, layout: StubLayout, options: InstallOptions
) -> list[ArtifactResult]:
    """Write gcc/g++/make/sh batch stubs into the root's bin directory.

    A stub whose content differs is always backed up and rewritten,
    regardless of force. An identical stub is left alone unless force is
    set.
    """
    ctx.feedback.info(
        "Unable to find RubyGems in site_ruby or core Ruby. Falling back to "
        f"installing {', '.join(STUB_COMMANDS[:-1])}, and {STUB_COMMANDS[-1]} "
        f"into {layout.root}"
    )
    ctx.filesystem.make_dirs(layout.bin_dir)

    results: list[ArtifactResult] = []
    for command in STUB_COMMANDS:
        target = layout.bin_dir / f"{command}.bat"
        content = render_stub(command, str(ctx.devkit_root))
        backup: Path | None = None
        if ctx.filesystem.exists(target):
            if not options.force and ctx.filesystem.read_text(target) == content:
                ctx.feedback.info(f"{target.name} is up to date, skipping.")
                results.append(ArtifactResult(path=target, action=ArtifactAction.SKIPPED))
                continue
            ctx.feedback.info(f"Creating backup of {target.name}")
            backup = backup_file(ctx, target, options.timestamp)

        ctx.filesystem.write_text(target, content)
        action = ArtifactAction.REPLACED if backup is not None else ArtifactAction.CREATED
        results.append(ArtifactResult(path=target, action=action, backup=backup))
    return results


def install_gem_override(
    ctx: DevKitContext,
    folder: Path,
    root: Path,
    options: InstallOptions,
    marker: ContentMarker = DEVKIT_MARKER,
) -> ArtifactResult:
    """Install the RubyGems override into one rubygems folder.

    - Missing file: written fresh
    - Existing file without DevKit content: fragment appended
    - Existing file with DevKit content: skipped, or backed up and
      rewritten when force is set
    """
    target = folder / "defaults" / OVERRIDE_FILE_NAME
    ctx.filesystem.make_dirs(target.parent)
    content = render_gem_override(str(ctx.devkit_root))

    if not ctx.filesystem.exists(target):
        ctx.feedback.info(f"Installing {target}")
        ctx.filesystem.write_text(target, content)
        return ArtifactResult(path=target, action=ArtifactAction.CREATED)

    if not marker.is_present(ctx.filesystem.read_text(target)):
        ctx.feedback.info("Updating existing RubyGems override.")
        ctx.filesystem.append_text(target, content)
        return ArtifactResult(path=target, action=ArtifactAction.APPENDED)

    if not options.force:
        ctx.feedback.info(f"RubyGems override already exists for {root}, skipping.")
        return ArtifactResult(path=target, action=ArtifactAction.SKIPPED)

    ctx.feedback.info(f"RubyGems override already exists for {root}, updating.")
    backup = backup_file(ctx, target, options.timestamp)
    ctx.filesystem.write_text(target, content)
    ctx.feedback.warning(OVERRIDE_REPLACED_NOTICE)
    return ArtifactResult(path=target, action=ArtifactAction.REPLACED, backup=backup)


def install_helper_library(
    ctx: DevKitContext, root: Path, options: InstallOptions
) -> ArtifactResult:
    """Install devkit.rb for the `ruby -rdevkit extconf.rb` use case.

    Any existing devkit.rb is treated as a namespace collision without
    looking at its content: skipped unless force, which backs it up first.
    """
    library_dir = helper_library_dir(root, ctx.filesystem)
    ctx.filesystem.make_dirs(library_dir)
    target = library_dir / HELPER_LIBRARY_NAME
    content = render_helper_library(str(ctx.devkit_root))

    if not ctx.filesystem.exists(target):
        ctx.feedback.info(f"Installing {target}")
        ctx.filesystem.write_text(target, content)
        return ArtifactResult(path=target, action=ArtifactAction.CREATED)

    if not options.force:
        ctx.feedback.warning(f"DevKit helper library already exists for {root}, skipping.")
        return ArtifactResult(path=target, action=ArtifactAction.SKIPPED)

    ctx.feedback.info(f"Updating (with backup) the DevKit helper library for {root}.")
    backup = backup_file(ctx, target, options.timestamp)
    ctx.filesystem.write_text(target, content)
    return ArtifactResult(path=target, action=ArtifactAction.REPLACED, backup=backup)


def install_root(ctx: DevKitContext, entry: str, options: InstallOptions) -> RootResult:
    """Inject DevKit helpers into a single installation root.

    Args:
        ctx: Application context
        entry: Installation root as listed in the plan
        options: Run-wide force flag and backup timestamp

    Returns:
        RootResult describing every artifact touched. A root that is not an
        existing directory yields an error result with no artifacts.
    """
    resolved = resolve_plan_entry(entry)
    if resolved is None or not ctx.filesystem.is_dir(resolved):
        root = resolved if resolved is not None else Path(entry)
        ctx.feedback.error(f"Invalid directory '{root}', skipping.")
        return RootResult(root=root, layout=None, artifacts=(), error="not a directory")
    root = resolved

    layout = classify_layout(root, ctx.filesystem)
    logger.debug("Classified %s as %s", root, layout)

    artifacts: list[ArtifactResult] = []
    if isinstance(layout, StubLayout):
        artifacts.extend(install_stubs(ctx, layout, options))
    elif isinstance(layout, OverrideLayout):
        for folder in layout.folders:
            artifacts.append(install_gem_override(ctx, folder, root, options))

    artifacts.append(install_helper_library(ctx, root, options))
    return RootResult(root=root, layout=layout, artifacts=tuple(artifacts))


def install_plan(ctx: DevKitContext, roots: list[str], *, force: bool) -> InstallReport:
    """Run install_root over every planned root, in order.

    A failure in one root is reported and recorded; the remaining roots are
    still processed.
    """
    options = InstallOptions(force=force, timestamp=format_timestamp(ctx.time.now()))

    results: list[RootResult] = []
    for entry in roots:
        try:
            results.append(install_root(ctx, entry, options))
        except OSError as e:
            root = resolve_plan_entry(entry) or Path(entry)
            ctx.feedback.error(f"Failed to install DevKit helpers into '{root}': {e}")
            results.append(RootResult(root=root, layout=None, artifacts=(), error=str(e)))
    return InstallReport(roots=tuple(results))
