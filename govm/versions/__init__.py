"""Version management module."""

from .manager import CURRENT_LINK, VersionManager
from .download_manager import DownloadManager
from .models import Version, parse_version

__all__ = ["CURRENT_LINK", "VersionManager", "DownloadManager", "Version", "parse_version"]
