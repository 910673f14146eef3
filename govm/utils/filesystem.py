"""Filesystem capability used by the SDK lifecycle operations.

Components take a ``FileSystem`` instead of calling ``os`` directly so the
install and listing logic can run against ``MemoryFileSystem`` in tests.
Only ``OsFileSystem`` can create and read symbolic links.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, NamedTuple, Set, Tuple, Union

import aiofiles

from ..errors import SymlinkUnsupportedError

PathLike = Union[str, os.PathLike]


class DirEntry(NamedTuple):
    name: str
    is_dir: bool


class FileSystem(ABC):
    """Minimal filesystem interface."""

    supports_symlinks: bool = False

    @abstractmethod
    def makedirs(self, path: PathLike, mode: int = 0o777) -> None:
        """Create a directory and its parents; existing directories are fine."""

    @abstractmethod
    async def write_file(self, path: PathLike, chunks: Iterable[bytes], mode: int = 0o644) -> None:
        """Create or truncate a file and write every chunk into it."""

    @abstractmethod
    def list_dir(self, path: PathLike) -> List[DirEntry]:
        """List immediate children. Symlinks are never reported as directories."""

    @abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        pass

    @abstractmethod
    def remove(self, path: PathLike) -> None:
        """Remove a file or link. Raises FileNotFoundError when absent."""

    def symlink(self, target: PathLike, link: PathLike) -> None:
        raise SymlinkUnsupportedError()

    def readlink(self, path: PathLike) -> str:
        raise SymlinkUnsupportedError()


class OsFileSystem(FileSystem):
    """Real operating system filesystem."""

    supports_symlinks = True

    def makedirs(self, path: PathLike, mode: int = 0o777) -> None:
        os.makedirs(path, mode=mode, exist_ok=True)

    async def write_file(self, path: PathLike, chunks: Iterable[bytes], mode: int = 0o644) -> None:
        def opener(file, flags):
            return os.open(file, flags, mode)

        async with aiofiles.open(path, 'wb', opener=opener) as f:
            for chunk in chunks:
                await f.write(chunk)

    def list_dir(self, path: PathLike) -> List[DirEntry]:
        with os.scandir(path) as it:
            return [DirEntry(entry.name, entry.is_dir(follow_symlinks=False)) for entry in it]

    def is_dir(self, path: PathLike) -> bool:
        return os.path.isdir(path)

    def remove(self, path: PathLike) -> None:
        os.remove(path)

    def symlink(self, target: PathLike, link: PathLike) -> None:
        os.symlink(target, link, target_is_directory=True)

    def readlink(self, path: PathLike) -> str:
        return os.readlink(path)


class MemoryFileSystem(FileSystem):
    """In-memory filesystem without symlink support."""

    def __init__(self):
        self.dirs: Dict[PurePosixPath, int] = {PurePosixPath("/"): 0o777}
        self.files: Dict[PurePosixPath, Tuple[bytes, int]] = {}

    @staticmethod
    def _key(path: PathLike) -> PurePosixPath:
        return PurePosixPath("/") / Path(path).as_posix()

    def makedirs(self, path: PathLike, mode: int = 0o777) -> None:
        key = self._key(path)
        if key in self.files:
            raise FileExistsError(str(path))
        for parent in reversed(key.parents):
            if parent in self.files:
                raise NotADirectoryError(str(parent))
            self.dirs.setdefault(parent, 0o777)
        self.dirs.setdefault(key, mode)

    async def write_file(self, path: PathLike, chunks: Iterable[bytes], mode: int = 0o644) -> None:
        key = self._key(path)
        if key.parent not in self.dirs:
            raise FileNotFoundError(str(path))
        if key in self.dirs:
            raise IsADirectoryError(str(path))
        previous = self.files.get(key)
        self.files[key] = (b"".join(chunks), previous[1] if previous else mode)

    def list_dir(self, path: PathLike) -> List[DirEntry]:
        key = self._key(path)
        if key in self.files:
            raise NotADirectoryError(str(path))
        if key not in self.dirs:
            raise FileNotFoundError(str(path))
        children: Set[DirEntry] = set()
        for d in self.dirs:
            if d.parent == key and d != key:
                children.add(DirEntry(d.name, True))
        for f in self.files:
            if f.parent == key:
                children.add(DirEntry(f.name, False))
        return sorted(children)

    def is_dir(self, path: PathLike) -> bool:
        return self._key(path) in self.dirs

    def remove(self, path: PathLike) -> None:
        key = self._key(path)
        if key in self.dirs:
            raise IsADirectoryError(str(path))
        if key not in self.files:
            raise FileNotFoundError(str(path))
        del self.files[key]

    def read_file(self, path: PathLike) -> bytes:
        key = self._key(path)
        if key not in self.files:
            raise FileNotFoundError(str(path))
        return self.files[key][0]

    def file_mode(self, path: PathLike) -> int:
        return self.files[self._key(path)][1]
