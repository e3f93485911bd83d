"""Plan file I/O for config.yml.

The plan is the list of Ruby installation roots that `dk install` will
enhance. It is written by `dk init`, edited by hand, and read back by
`dk review` and `dk install`.
"""

from pathlib import Path

import yaml

PLAN_FILE_NAME = "config.yml"

PLAN_HEADER = """\
# This configuration file contains the absolute path locations of all
# installed Rubies to be enhanced to work with the DevKit. This config
# file is generated by the 'dk init' step and may be modified before
# running the 'dk install' step. To include any installed Rubies that
# were not automagically discovered, simply add a line below the triple
# hyphens with the absolute path to the Ruby root directory.
#
# Example:
#
# ---
# - C:/ruby19trunk
# - C:/ruby192dev
#
"""


class PlanError(Exception):
    """Base class for problems with the persisted plan."""


class PlanNotFoundError(PlanError):
    """The plan file does not exist."""


class InvalidPlanError(PlanError):
    """The plan file exists but cannot be used."""


def plan_path(cwd: Path) -> Path:
    """Return the location of the plan file for a working directory."""
    return cwd / PLAN_FILE_NAME


def save_plan(path: Path, roots: list[str]) -> None:
    """Write the plan, overwriting any existing file.

    Args:
        path: Plan file location
        roots: Installation roots in display order
    """
    if roots:
        body = yaml.safe_dump(list(roots), explicit_start=True, default_flow_style=False)
    else:
        body = "---\n"
    path.write_text(PLAN_HEADER + body, encoding="utf-8")


def load_plan(path: Path) -> list[str]:
    """Load the plan from disk.

    An empty document (as written by `dk init` when nothing was found) loads
    as an empty list.

    Raises:
        PlanNotFoundError: If the file does not exist
        InvalidPlanError: If the file is unreadable, is not valid YAML, is not
            a list, or contains non-string entries
    """
    if not path.exists():
        raise PlanNotFoundError(f"Unable to find '{path.name}'")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise InvalidPlanError(f"Error loading '{path.name}': {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise InvalidPlanError(f"Invalid configuration in '{path.name}': expected a list")
    for entry in data:
        if not isinstance(entry, str):
            raise InvalidPlanError(
                f"Invalid configuration in '{path.name}': {entry!r} is not a path"
            )
    return data


def require_installable_plan(roots: list[str], path: Path) -> list[str]:
    """Ensure the plan lists at least one Ruby.

    Raises:
        InvalidPlanError: If roots is empty
    """
    if not roots:
        raise InvalidPlanError(f"No Rubies listed in '{path.name}'")
    return roots


def resolve_plan_entry(entry: str) -> Path | None:
    """Expand and absolutize a plan entry.

    Returns None when the entry cannot be turned into a path at all, such
    as '~nosuchuser/ruby'.
    """
    try:
        return Path(entry).expanduser().resolve()
    except (RuntimeError, ValueError, OSError):
        return None
