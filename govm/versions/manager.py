"""Installed version inventory and the ``current`` link."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from ..errors import (
    LinkFailedError,
    ListFailedError,
    NoCurrentVersionError,
    SymlinkUnsupportedError,
    VersionNotInstalledError,
)
from ..utils.filesystem import FileSystem, OsFileSystem
from .models import Version, parse_version

logger = logging.getLogger(__name__)

CURRENT_LINK = "current"


class VersionManager:
    def __init__(self, install_root: Union[str, Path], fs: Optional[FileSystem] = None):
        self.install_root = Path(install_root)
        self.fs = fs or OsFileSystem()

    @property
    def current_path(self) -> Path:
        return self.install_root / CURRENT_LINK

    def version_path(self, version: Version) -> Path:
        return self.install_root / str(version)

    def list_installed(self) -> List[Version]:
        """List installed versions in directory listing order.

        Directory names are trusted as canonical; ``current`` is never
        reported, even if it is a real directory.
        """
        try:
            entries = self.fs.list_dir(self.install_root)
        except OSError as exc:
            raise ListFailedError(self.install_root, exc.strerror or str(exc)) from exc

        return [
            Version(value=entry.name)
            for entry in entries
            if entry.is_dir and entry.name != CURRENT_LINK
        ]

    def set_current(self, version: Version) -> None:
        """Point ``current`` at an installed version, replacing any old link."""
        if not self.fs.supports_symlinks:
            raise SymlinkUnsupportedError()

        target = self.version_path(version)
        if not self.fs.is_dir(target):
            raise VersionNotInstalledError(str(version))

        try:
            self.fs.remove(self.current_path)
        except FileNotFoundError:
            pass  # nothing linked yet
        except OSError as exc:
            raise LinkFailedError(self.current_path, exc.strerror or str(exc)) from exc

        try:
            self.fs.symlink(target, self.current_path)
        except OSError as exc:
            raise LinkFailedError(self.current_path, exc.strerror or str(exc)) from exc
        logger.debug("linked %s -> %s", self.current_path, target)

    def get_current(self) -> Version:
        """Return the version ``current`` points at.

        The link target's last segment is parsed again so a hand-edited
        link surfaces as ``InvalidVersionError``.
        """
        if not self.fs.supports_symlinks:
            raise SymlinkUnsupportedError()

        try:
            link = self.fs.readlink(self.current_path)
        except OSError as exc:
            raise NoCurrentVersionError() from exc

        return parse_version(os.path.basename(os.path.normpath(link)))
