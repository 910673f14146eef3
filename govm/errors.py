"""Exception hierarchy for govm.

Each component raises a specific error type so the CLI can report
failures without inspecting messages.
"""

from typing import Optional


class GovmError(Exception):
    """Base exception for all govm failures."""


class ConfigError(GovmError):
    """Raised for invalid runtime configuration."""


class InvalidVersionError(GovmError, ValueError):
    """Raised when a string cannot be parsed as a version."""


class DownloadFailedError(GovmError):
    """Raised when an archive cannot be fetched."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"failed to download {url}: {reason}")
        self.url = url


class ExtractFailedError(GovmError):
    """Raised when an archive cannot be unpacked."""


class VersionNotInstalledError(GovmError):
    """Raised when an operation requires a version that is not installed."""

    def __init__(self, version: str):
        super().__init__(f"go version {version} is not installed locally")
        self.version = version


class NoCurrentVersionError(GovmError):
    """Raised when no current version is linked."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "current version is not linked")


class SymlinkUnsupportedError(GovmError):
    """Raised when the filesystem cannot provide symbolic links."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "symbolic links are not supported by this filesystem")


class ListFailedError(GovmError):
    """Raised when the install root cannot be read."""

    def __init__(self, root, reason: str):
        super().__init__(f"failed to list installed versions in {root}: {reason}")
        self.root = root


class LinkFailedError(GovmError):
    """Raised when the current link cannot be replaced."""

    def __init__(self, link, reason: str):
        super().__init__(f"failed to update {link}: {reason}")
        self.link = link
