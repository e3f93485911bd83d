"""Production filesystem implementation backed by pathlib."""

from pathlib import Path

from devkit.core.filesystem.abc import FileSystem


class RealFileSystem(FileSystem):
    """Production implementation operating on the local disk.

    Every write opens its own file handle and releases it before returning.
    """

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def exists(self, path: Path) -> bool:
        return path.exists()

    def glob_dirs(self, root: Path, pattern: str) -> list[Path]:
        if not root.is_dir():
            return []
        return sorted(match for match in root.glob(pattern) if match.is_dir())

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def read_text(self, path: Path) -> str:
        # Undecodable bytes (cp1252 vendor files) survive as lone surrogates
        return path.read_text(encoding="utf-8", errors="surrogateescape")

    def write_text(self, path: Path, content: str) -> None:
        with path.open("w", encoding="utf-8") as f:
            f.write(content)

    def append_text(self, path: Path, content: str) -> None:
        with path.open("a", encoding="utf-8") as f:
            f.write(content)

    def rename(self, source: Path, target: Path) -> None:
        if target.exists():
            raise FileExistsError(f"Refusing to overwrite existing file {target}")
        source.rename(target)
