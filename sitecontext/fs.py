from __future__ import annotations

import os
from pathlib import Path, PurePath, PurePosixPath
from typing import Union

PathLike = Union[str, os.PathLike]


class LocalFileSystem:
    """Read and write site files on the local disk."""

    def path(self, value: PathLike) -> Path:
        return Path(value)

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def is_dir(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def list_files(self, root: PathLike) -> list[Path]:
        root = Path(root)
        if not root.exists():
            return []
        return sorted((path for path in root.rglob("*") if path.is_file()), key=lambda p: p.as_posix())

    def read_bytes(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()

    def read_text(self, path: PathLike) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)


class MemoryFileSystem:
    """In-memory file tree keyed by POSIX paths.

    Useful for tests and for building a context from generated sources
    without touching the disk. Directories exist implicitly whenever a
    file lives below them.
    """

    def __init__(self, files: dict[str, Union[str, bytes]] | None = None) -> None:
        self._files: dict[PurePosixPath, bytes] = {}
        for name, data in (files or {}).items():
            self.add_file(name, data)

    def path(self, value: PathLike) -> PurePosixPath:
        return PurePosixPath(os.fspath(value))

    def add_file(self, path: PathLike, data: Union[str, bytes]) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._files[self.path(path)] = data

    def remove_file(self, path: PathLike) -> None:
        try:
            del self._files[self.path(path)]
        except KeyError:
            raise FileNotFoundError(os.fspath(path)) from None

    def exists(self, path: PathLike) -> bool:
        return self.path(path) in self._files or self.is_dir(path)

    def is_dir(self, path: PathLike) -> bool:
        target = self.path(path)
        return any(target in name.parents for name in self._files)

    def list_files(self, root: PathLike) -> list[PurePosixPath]:
        target = self.path(root)
        return sorted((name for name in self._files if target in name.parents), key=lambda p: p.as_posix())

    def read_bytes(self, path: PathLike) -> bytes:
        try:
            return self._files[self.path(path)]
        except KeyError:
            raise FileNotFoundError(os.fspath(path)) from None

    def read_text(self, path: PathLike) -> str:
        return self.read_bytes(path).decode("utf-8")

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        self._files[self.path(path)] = bytes(data)


def relative_posix(path: PurePath, root: PurePath) -> str:
    return path.relative_to(root).as_posix()
