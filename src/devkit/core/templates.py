"""Rendering of the helper files injected into Ruby installations.

All content is parameterized by the toolchain root. Batch stubs embed it
with plain backslashes; Ruby sources embed it inside single-quoted string
literals, where each backslash must be written twice.
"""

STUB_COMMANDS = ("gcc", "g++", "make", "sh")


def windows_path(devkit_root: str) -> str:
    """Return devkit_root with backslash separators."""
    return devkit_root.replace("/", "\\")


def ruby_literal_path(devkit_root: str) -> str:
    """Return devkit_root escaped for a single-quoted Ruby string literal.

    Every separator, whether '/' or '\\', becomes a doubled backslash.
    """
    return devkit_root.replace("\\", "/").replace("/", "\\\\")


def render_stub(command: str, devkit_root: str) -> str:
    """Render the batch script that runs command with the DevKit on PATH."""
    return (
        "@ECHO OFF\n"
        "SETLOCAL\n"
        f"SET DEVKIT={windows_path(devkit_root)}\n"
        "SET PATH=%DEVKIT%\\bin;%DEVKIT%\\mingw\\bin;%PATH%\n"
        f"{command}.exe %*\n"
    )


def _path_enhancement(devkit_root: str, indent: str) -> str:
    root = ruby_literal_path(devkit_root)
    lines = [
        f"unless ENV['PATH'].include?('{root}\\\\mingw\\\\bin') then",
        "  puts 'Temporarily enhancing PATH to include DevKit...'",
        f"  ENV['PATH'] = '{root}\\\\bin;{root}\\\\mingw\\\\bin;' + ENV['PATH']",
        "end",
    ]
    return "".join(f"{indent}{line}\n" for line in lines)


def render_gem_override(devkit_root: str) -> str:
    """Render the RubyGems operating_system.rb fragment.

    The fragment registers a Gem.pre_install hook so every `gem install`
    builds with the DevKit on PATH.
    """
    return (
        "# override 'gem install' to enable RubyInstaller DevKit usage\n"
        "Gem.pre_install do |i|\n"
        f"{_path_enhancement(devkit_root, indent='  ')}"
        "end\n"
    )


def render_helper_library(devkit_root: str) -> str:
    """Render devkit.rb, loaded explicitly via `ruby -rdevkit`."""
    return (
        "# enable RubyInstaller DevKit usage as a vendorable helper library\n"
        f"{_path_enhancement(devkit_root, indent='')}"
    )
