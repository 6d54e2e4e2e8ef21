"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import shutil
from pathlib import Path

from layout_guard.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        return str(Path(path).resolve())

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def glob_source_files(
        self,
        path: str,
        extensions: tuple[str, ...],
        exclude: tuple[str, ...] = (),
    ) -> list[str]:
        """Get all source files in path (recursive if directory), sorted."""
        path_obj = Path(path).resolve()
        if path_obj.is_file():
            return [str(path_obj)] if path_obj.suffix in extensions else []
        found: list[str] = []
        for candidate in path_obj.rglob("*"):
            if candidate.suffix not in extensions or not candidate.is_file():
                continue
            relative_parts = candidate.relative_to(path_obj).parts
            if any(part in exclude for part in relative_parts):
                continue
            found.append(str(candidate))
        return sorted(found)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        # newline="" keeps \r\n intact so fixes never rewrite line endings.
        with open(path, encoding=encoding, newline="") as handle:
            return handle.read()

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        with open(path, "w", encoding=encoding, newline="") as handle:
            handle.write(content)

    def backup(self, path: str, suffix: str) -> str:
        target = f"{path}{suffix}"
        shutil.copy2(path, target)
        return target
