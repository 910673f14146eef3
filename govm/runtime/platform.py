"""Host platform detection and archive naming."""

import platform

from pydantic import BaseModel, ConfigDict

from ..versions.models import Version

# Map to upstream GOOS/GOARCH identifiers
OS_MAP = {
    "windows": "windows",
    "linux": "linux",
    "darwin": "darwin",
    "freebsd": "freebsd",
}
ARCH_MAP = {
    "amd64": "amd64",
    "x86_64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "arm64": "arm64",
    "aarch64": "arm64",
    "armv6l": "armv6l",
    "armv7l": "armv6l",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
}


class HostPlatform(BaseModel):
    model_config = ConfigDict(frozen=True)

    os: str
    arch: str

    @classmethod
    def detect(cls) -> "HostPlatform":
        """Describe the running machine."""
        system = platform.system().lower()
        machine = platform.machine().lower()
        return cls(os=OS_MAP.get(system, system), arch=ARCH_MAP.get(machine, machine))


def artifact_name(host: HostPlatform, version: Version) -> str:
    """Archive file name, e.g. ``go1.17.1.linux-amd64.tar.gz``."""
    return f"go{version.number}.{host.os}-{host.arch}.tar.gz"


def download_url(base: str, name: str) -> str:
    return f"{base.rstrip('/')}/dl/{name}"
