"""Shared test fixtures."""

import io
import tarfile
from typing import Dict, Optional

import pytest


def build_archive(files: Dict[str, bytes], dirs: Optional[list] = None, wrapper: str = "go") -> bytes:
    """Build a gzipped tar whose entries all live under ``wrapper/``."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        for name in dirs or []:
            info = tarfile.TarInfo(f"{wrapper}/{name}" if name else wrapper)
            info.type = tarfile.DIRTYPE
            info.mode = 0o755
            tar.addfile(info)
        for name, content in files.items():
            info = tarfile.TarInfo(f"{wrapper}/{name}")
            info.size = len(content)
            info.mode = 0o755 if name.startswith("bin/") else 0o644
            tar.addfile(info, io.BytesIO(content))
    return buf.getvalue()


@pytest.fixture
def go_archive() -> bytes:
    return build_archive(
        {"bin/go": b"#!/bin/sh\necho go\n", "VERSION": b"go1.17.1"},
        dirs=["", "bin"],
    )
