"""SDK runtime installation."""

from .archive import ArchiveInstaller, strip_wrapper
from .platform import HostPlatform, artifact_name, download_url
from .sdk_manager import SdkManager

__all__ = [
    "ArchiveInstaller",
    "strip_wrapper",
    "HostPlatform",
    "artifact_name",
    "download_url",
    "SdkManager",
]
