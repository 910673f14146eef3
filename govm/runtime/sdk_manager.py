"""Go SDK manager for installing and switching local SDKs."""

import logging
from pathlib import Path
from typing import List, Optional

from ..config import GovmConfig
from ..utils.filesystem import FileSystem, OsFileSystem
from ..versions.download_manager import DownloadManager
from ..versions.manager import VersionManager
from ..versions.models import Version
from .archive import ArchiveInstaller
from .platform import HostPlatform, artifact_name, download_url

logger = logging.getLogger(__name__)


class SdkManager:
    def __init__(self, config: GovmConfig, fs: Optional[FileSystem] = None,
                 host: Optional[HostPlatform] = None,
                 downloader: Optional[DownloadManager] = None):
        self.config = config
        self.fs = fs or OsFileSystem()
        self.host = host or HostPlatform.detect()
        self.downloader = downloader
        self.versions = VersionManager(config.install_root, self.fs)
        self.installer = ArchiveInstaller(self.fs)

    def get_download_url(self, version: Version) -> str:
        """Get the archive URL for the current platform."""
        return download_url(self.config.download_url, artifact_name(self.host, version))

    async def download(self, version: Version) -> bytes:
        url = self.get_download_url(version)
        if self.downloader:
            return await self.downloader.fetch(url)
        async with DownloadManager(self.config.timeout) as downloader:
            return await downloader.fetch(url)

    async def install(self, version: Version) -> Path:
        """Download and extract a version; reinstalling overwrites in place."""
        install_path = self.versions.version_path(version)
        archive = await self.download(version)
        logger.debug("downloaded %s (%d bytes), extracting to %s", version, len(archive), install_path)

        await self.installer.install(archive, install_path)
        logger.debug("installed go %s to %s", version, install_path)
        return install_path

    def use(self, version: Version) -> None:
        self.versions.set_current(version)
        logger.info("now using go %s", version)

    def list_installed(self) -> List[Version]:
        return self.versions.list_installed()

    def current(self) -> Version:
        return self.versions.get_current()
