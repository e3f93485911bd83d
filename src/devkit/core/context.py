"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from devkit.core.filesystem import FileSystem, RealFileSystem
from devkit.core.plan_store import plan_path
from devkit.core.registry import RuntimeRegistry, WindowsRuntimeRegistry
from devkit.core.time import RealTime, Time
from devkit.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class DevKitContext:
    """Immutable context holding all dependencies for devkit operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    filesystem: FileSystem
    registry: RuntimeRegistry
    time: Time
    feedback: UserFeedback
    cwd: Path  # Current working directory at CLI invocation; holds the plan file
    devkit_root: Path  # Toolchain root embedded in every generated helper

    @property
    def plan_path(self) -> Path:
        return plan_path(self.cwd)


def create_context(*, devkit_root: Path | None = None) -> DevKitContext:
    """Create production context with real implementations.

    Args:
        devkit_root: DevKit installation directory. Defaults to the current
            working directory, where the DevKit archive is usually extracted.

    Returns:
        DevKitContext with real implementations
    """
    cwd = Path.cwd()
    root = devkit_root if devkit_root is not None else cwd

    return DevKitContext(
        filesystem=RealFileSystem(),
        registry=WindowsRuntimeRegistry(),
        time=RealTime(),
        feedback=InteractiveFeedback(),
        cwd=cwd,
        devkit_root=root.expanduser().resolve(),
    )
