"""Runtime configuration.

All environment variable parsing happens here. Other modules receive a
validated ``GovmConfig`` instead of reading the environment themselves.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

DEFAULT_SDK_ROOT = Path.home() / ".govm" / "sdks"
DEFAULT_DOWNLOAD_URL = "https://golang.org"
DEFAULT_TIMEOUT = 60.0


class GovmConfig(BaseModel):
    """Validated configuration for one invocation.

    Attributes:
        install_root: Directory holding one subdirectory per installed
            version plus the ``current`` link.
        download_url: Base URL of the SDK distribution site.
        timeout: Seconds allowed for connecting and for each socket read.
            The download as a whole is not time limited.
    """

    model_config = ConfigDict(frozen=True)

    install_root: Path
    download_url: str = DEFAULT_DOWNLOAD_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "GovmConfig":
        """Build config from environment variables.

        Raises:
            ConfigError: If a value is invalid.
        """
        env = os.environ if environ is None else environ
        sdk_root = Path(env.get("GOVM_SDK_ROOT") or DEFAULT_SDK_ROOT).expanduser()
        values = {
            "install_root": sdk_root / "go",
            "download_url": env.get("GOVM_DOWNLOAD_URL") or DEFAULT_DOWNLOAD_URL,
        }
        if env.get("GOVM_TIMEOUT"):
            values["timeout"] = env["GOVM_TIMEOUT"]
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc
