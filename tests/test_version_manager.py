"""Tests for the installed version inventory and current link."""

import os

import pytest

from govm.errors import (
    InvalidVersionError,
    LinkFailedError,
    ListFailedError,
    NoCurrentVersionError,
    SymlinkUnsupportedError,
    VersionNotInstalledError,
)
from govm.utils import MemoryFileSystem, OsFileSystem
from govm.versions import CURRENT_LINK, Version, VersionManager, parse_version

INSTALLED = ["v1.16", "v1.16.3", "v1.17.1"]


@pytest.fixture
def root(tmp_path):
    root = tmp_path / "sdks" / "go"
    for name in INSTALLED:
        (root / name).mkdir(parents=True)
    return root


def names(versions):
    return sorted(str(v) for v in versions)


def test_list_returns_installed_directories(root):
    assert names(VersionManager(root).list_installed()) == INSTALLED


def test_list_excludes_current_link(root):
    os.symlink(root / "v1.16", root / CURRENT_LINK)
    assert names(VersionManager(root).list_installed()) == INSTALLED


def test_list_excludes_current_directory(root):
    (root / CURRENT_LINK).mkdir()
    assert names(VersionManager(root).list_installed()) == INSTALLED


def test_list_ignores_files(root):
    (root / "notes.txt").write_text("hello")
    assert names(VersionManager(root).list_installed()) == INSTALLED


def test_list_does_not_reparse_names(root):
    versions = VersionManager(root).list_installed()
    assert Version(value="v1.17.1") in versions


def test_list_missing_root_fails(tmp_path):
    with pytest.raises(ListFailedError):
        VersionManager(tmp_path / "missing").list_installed()


def test_list_on_memory_filesystem():
    fs = MemoryFileSystem()
    fs.makedirs("/go/1.17.1")
    fs.makedirs("/go/1.16")
    assert names(VersionManager("/go", fs).list_installed()) == ["1.16", "1.17.1"]


def test_set_current_links_version(root):
    manager = VersionManager(root)
    manager.set_current(Version(value="v1.17.1"))

    link = root / CURRENT_LINK
    assert link.is_symlink()
    assert os.readlink(link) == str(root / "v1.17.1")
    assert link.resolve() == (root / "v1.17.1").resolve()


def test_set_current_replaces_previous_link(tmp_path):
    root = tmp_path / "go"
    for name in ("1.16.3", "1.17.1"):
        (root / name).mkdir(parents=True)
    manager = VersionManager(root)

    manager.set_current(parse_version("1.16.3"))
    manager.set_current(parse_version("1.17.1"))

    assert manager.get_current() == parse_version("1.17.1")
    assert (root / CURRENT_LINK).resolve() == (root / "1.17.1").resolve()


def test_set_current_not_installed_leaves_link_unchanged(root):
    manager = VersionManager(root)
    manager.set_current(Version(value="v1.16"))

    with pytest.raises(VersionNotInstalledError):
        manager.set_current(parse_version("99.99.99"))

    assert os.readlink(root / CURRENT_LINK) == str(root / "v1.16")


def test_set_current_not_installed_creates_no_link(root):
    with pytest.raises(VersionNotInstalledError):
        VersionManager(root).set_current(parse_version("99.99.99"))
    assert not os.path.lexists(root / CURRENT_LINK)


def test_get_current_without_link_fails(root):
    with pytest.raises(NoCurrentVersionError):
        VersionManager(root).get_current()


def test_get_current_reparses_link_target(tmp_path):
    root = tmp_path / "go"
    (root / "1.16.8").mkdir(parents=True)
    manager = VersionManager(root)
    manager.set_current(parse_version("v1.16.8"))

    assert manager.get_current() == parse_version("v1.16.8")


def test_get_current_rejects_corrupted_link(tmp_path):
    root = tmp_path / "go"
    (root / "garbage").mkdir(parents=True)
    os.symlink(root / "garbage", root / CURRENT_LINK)

    with pytest.raises(InvalidVersionError):
        VersionManager(root).get_current()


def test_symlinks_unsupported_on_memory_filesystem():
    fs = MemoryFileSystem()
    fs.makedirs("/go/1.17.1")
    manager = VersionManager("/go", fs)

    with pytest.raises(SymlinkUnsupportedError):
        manager.set_current(parse_version("1.17.1"))
    with pytest.raises(SymlinkUnsupportedError):
        manager.get_current()
    assert names(manager.list_installed()) == ["1.17.1"]


def test_set_current_over_real_directory_fails(root):
    (root / CURRENT_LINK).mkdir()

    with pytest.raises(LinkFailedError) as excinfo:
        VersionManager(root).set_current(Version(value="v1.17.1"))

    assert isinstance(excinfo.value.__cause__, OSError)
    assert (root / CURRENT_LINK).is_dir()
    assert not (root / CURRENT_LINK).is_symlink()


class ReadOnlyLinks(OsFileSystem):
    def symlink(self, target, link):
        raise PermissionError(13, "Permission denied")


def test_set_current_symlink_failure_is_typed(root):
    with pytest.raises(LinkFailedError) as excinfo:
        VersionManager(root, ReadOnlyLinks()).set_current(Version(value="v1.16"))

    assert "Permission denied" in str(excinfo.value)
    assert not os.path.lexists(root / CURRENT_LINK)
