"""Unpacking of SDK release archives.

Upstream archives wrap their payload in a single top-level ``go/``
directory. That segment is stripped so files land directly in the
per-version install directory.
"""

import io
import logging
import tarfile
import zlib
from pathlib import Path, PurePosixPath
from typing import Callable, Iterator, Optional, Union

from ..errors import ExtractFailedError
from ..utils.filesystem import FileSystem, OsFileSystem

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024

Renamer = Callable[[str], str]


def strip_wrapper(name: str) -> str:
    """Drop the first path segment of an archive entry name."""
    parts = [part for part in name.split("/") if part and part != "."]
    return "/".join(parts[1:])


def _read_chunks(fileobj) -> Iterator[bytes]:
    while chunk := fileobj.read(CHUNK_SIZE):
        yield chunk


class ArchiveInstaller:
    def __init__(self, fs: Optional[FileSystem] = None, renamer: Optional[Renamer] = strip_wrapper):
        self.fs = fs or OsFileSystem()
        self.renamer = renamer

    def _destination(self, target: Path, name: str) -> Optional[Path]:
        rel = self.renamer(name) if self.renamer else name
        if not rel:
            return None
        rel_path = PurePosixPath(rel)
        if rel_path.is_absolute() or ".." in rel_path.parts:
            raise ExtractFailedError(f"archive entry {name!r} escapes the target directory")
        return target.joinpath(*rel_path.parts)

    async def install(self, archive: bytes, target: Union[str, Path]) -> None:
        """Extract a gzipped tar archive into ``target``.

        Entries are processed in stream order. Existing files are
        overwritten; nothing is cleaned up when extraction fails, so the
        target is left in an indeterminate state.

        Raises:
            ExtractFailedError: On decompression, tar or write errors.
        """
        target = Path(target)
        try:
            self.fs.makedirs(target)
            with tarfile.open(fileobj=io.BytesIO(archive), mode="r|gz") as tar:
                for member in tar:
                    await self._install_member(tar, member, target)
        except ExtractFailedError:
            raise
        except (OSError, EOFError, tarfile.TarError, zlib.error) as exc:
            raise ExtractFailedError(f"failed to extract archive into {target}: {exc}") from exc

    async def _install_member(self, tar: tarfile.TarFile, member: tarfile.TarInfo, target: Path):
        dest = self._destination(target, member.name)
        if dest is None:
            return

        if member.isdir():
            self.fs.makedirs(dest, member.mode & 0o7777)
            return

        if not member.isfile():
            logger.warning("skipping unsupported archive entry %s", member.name)
            return

        # archives may omit directory entries for a file's parents
        self.fs.makedirs(dest.parent)
        source = tar.extractfile(member)
        try:
            await self.fs.write_file(dest, _read_chunks(source), member.mode & 0o7777)
        finally:
            source.close()
