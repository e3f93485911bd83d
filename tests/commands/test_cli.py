"""Tests for the dk command line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from devkit.cli.cli import cli
from devkit.cli.constants import EXIT_CONFIG, EXIT_USAGE
from devkit.core.plan_store import load_plan, save_plan
from devkit.core.registry.abc import RegistryInstallation
from tests.fakes.context import create_test_context
from tests.fakes.registry import FakeRuntimeRegistry
from tests.fakes.user_feedback import FakeUserFeedback


def _make_ruby(base: Path, name: str) -> Path:
    root = base / name
    (root / "bin").mkdir(parents=True)
    return root


# ============================================================================
# Usage handling
# ============================================================================


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["--help"],
        ["-h"],
        ["install", "--help"],
        ["review", "-h"],
    ],
)
def test_help_and_no_arguments_exit_with_usage_code(tmp_path: Path, args: list[str]) -> None:
    runner = CliRunner()
    ctx = create_test_context(cwd=tmp_path)

    result = runner.invoke(cli, args, obj=ctx)

    assert result.exit_code == EXIT_USAGE
    assert "Usage:" in result.output
    assert not (tmp_path / "config.yml").exists()


def test_top_level_help_lists_commands(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["--help"], obj=create_test_context(cwd=tmp_path))

    for command in ("init", "review", "install"):
        assert command in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["bogus"],
        ["install", "extra"],
        ["init", "review"],
        ["review", "--force"],
        ["install", "--verbose"],
    ],
)
def test_unrecognized_arguments_are_usage_errors(tmp_path: Path, args: list[str]) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, args, obj=create_test_context(cwd=tmp_path))

    assert result.exit_code == EXIT_USAGE


# ============================================================================
# init
# ============================================================================


def test_init_writes_discovered_rubies(tmp_path: Path) -> None:
    registry = FakeRuntimeRegistry(
        keys={
            "Software\\RubyInstaller\\MRI": [
                RegistryInstallation("1.8.7", "C:\\Ruby187"),
                RegistryInstallation("1.9.2", "C:\\Ruby192"),
            ]
        }
    )
    runner = CliRunner()
    ctx = create_test_context(cwd=tmp_path, registry=registry)

    result = runner.invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 0
    assert "Initialization complete!" in result.output
    assert load_plan(tmp_path / "config.yml") == ["C:/Ruby187", "C:/Ruby192"]


def test_init_with_nothing_found_writes_empty_plan(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = create_test_context(cwd=tmp_path)

    result = runner.invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 0
    content = (tmp_path / "config.yml").read_text(encoding="utf-8")
    assert content.startswith("# This configuration file")
    assert content.endswith("---\n")


# ============================================================================
# review
# ============================================================================


def test_review_without_plan_is_config_error(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = create_test_context(cwd=tmp_path)

    result = runner.invoke(cli, ["review"], obj=ctx)

    assert result.exit_code == EXIT_CONFIG
    assert "Have you run 'dk init' yet?" in result.output
    assert list(tmp_path.iterdir()) == []


def test_review_lists_expanded_roots(tmp_path: Path) -> None:
    first = _make_ruby(tmp_path, "ruby187")
    second = _make_ruby(tmp_path, "ruby192")
    save_plan(tmp_path / "config.yml", [str(first), str(second)])
    runner = CliRunner()

    result = runner.invoke(cli, ["review"], obj=create_test_context(cwd=tmp_path))

    assert result.exit_code == 0
    assert "will be injected into the following Rubies" in result.output
    lines = result.output.splitlines()
    assert lines.index(str(first.resolve())) < lines.index(str(second.resolve()))


def test_review_lists_unexpandable_entry_verbatim(tmp_path: Path) -> None:
    ruby = _make_ruby(tmp_path, "ruby192")
    save_plan(tmp_path / "config.yml", ["~nosuchuser_devkit/ruby", str(ruby)])
    runner = CliRunner()

    result = runner.invoke(cli, ["review"], obj=create_test_context(cwd=tmp_path))

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines.index("~nosuchuser_devkit/ruby") < lines.index(str(ruby.resolve()))


def test_review_rejects_non_list_plan(tmp_path: Path) -> None:
    (tmp_path / "config.yml").write_text("ruby: C:/Ruby192\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(cli, ["review"], obj=create_test_context(cwd=tmp_path))

    assert result.exit_code == EXIT_CONFIG
    assert "Invalid configuration" in result.output


# ============================================================================
# install
# ============================================================================


def test_install_without_plan_is_config_error(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["install"], obj=create_test_context(cwd=tmp_path))

    assert result.exit_code == EXIT_CONFIG
    assert "Have you run 'dk init' yet?" in result.output


def test_install_with_empty_plan_is_config_error(tmp_path: Path) -> None:
    save_plan(tmp_path / "config.yml", [])
    runner = CliRunner()

    result = runner.invoke(cli, ["install"], obj=create_test_context(cwd=tmp_path))

    assert result.exit_code == EXIT_CONFIG
    assert "No Rubies listed" in result.output


def test_install_injects_into_planned_rubies(tmp_path: Path) -> None:
    root = _make_ruby(tmp_path, "ruby192")
    save_plan(tmp_path / "config.yml", [str(root)])
    runner = CliRunner()

    result = runner.invoke(cli, ["install"], obj=create_test_context(cwd=tmp_path))

    assert result.exit_code == 0
    assert "SET DEVKIT=C:\\DevKit" in (root / "bin" / "gcc.bat").read_text(encoding="utf-8")
    assert (root / "lib" / "ruby" / "site_ruby" / "devkit.rb").exists()


def test_install_continues_past_invalid_directory(tmp_path: Path) -> None:
    root = _make_ruby(tmp_path, "ruby192")
    save_plan(tmp_path / "config.yml", [str(tmp_path / "missing"), str(root)])
    feedback = FakeUserFeedback()
    runner = CliRunner()

    result = runner.invoke(
        cli, ["install"], obj=create_test_context(cwd=tmp_path, feedback=feedback)
    )

    assert result.exit_code == 0
    assert len(feedback.errors) == 1
    assert (root / "bin" / "sh.bat").exists()


@pytest.mark.parametrize("flag", ["-f", "--force"])
def test_install_force_flag_replaces_helper_library(tmp_path: Path, flag: str) -> None:
    root = _make_ruby(tmp_path, "ruby192")
    library = root / "lib" / "ruby" / "site_ruby" / "devkit.rb"
    library.parent.mkdir(parents=True)
    library.write_text("# collision\n", encoding="utf-8")
    save_plan(tmp_path / "config.yml", [str(root)])
    runner = CliRunner()

    result = runner.invoke(cli, ["install", flag], obj=create_test_context(cwd=tmp_path))

    assert result.exit_code == 0
    assert (library.parent / "devkit.rb.20100615123045").read_text(encoding="utf-8") == (
        "# collision\n"
    )
    assert "DevKit" in library.read_text(encoding="utf-8")
