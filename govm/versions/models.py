"""Version value type and parsing."""

import re

from pydantic import BaseModel, ConfigDict

from ..errors import InvalidVersionError

_IDENT = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
SEMVER_PATTERN = re.compile(
    r"^[vV]?(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?"
    rf"(?:-(?P<prerelease>{_IDENT}))?"
    rf"(?:\+(?P<build>{_IDENT}))?$"
)


class Version(BaseModel):
    """A canonical SDK version string.

    Two versions are equal iff their canonical strings are equal. Directory
    names under the install root are wrapped as-is, without re-parsing.
    """

    model_config = ConfigDict(frozen=True)

    value: str

    def __str__(self) -> str:
        return self.value

    @property
    def number(self) -> str:
        """Bare numeric form, used in archive file names."""
        return self.value[1:] if self.value.startswith("v") else self.value

    @classmethod
    def parse(cls, text: str) -> "Version":
        return parse_version(text)


def parse_version(text: str) -> Version:
    """Parse a semantic version such as ``1.16``, ``v1.17.1`` or ``1.18.0-rc.1+build.5``.

    The canonical form drops the ``v`` prefix and leading zeros of numeric
    components. Two-component versions stay two-component.

    Raises:
        InvalidVersionError: If the input is not a semantic version.
    """
    match = SEMVER_PATTERN.match((text or "").strip())
    if not match:
        raise InvalidVersionError(f"invalid version: {text!r}")

    numbers = [match.group("major"), match.group("minor")]
    if match.group("patch") is not None:
        numbers.append(match.group("patch"))
    canonical = ".".join(str(int(n)) for n in numbers)
    if match.group("prerelease"):
        canonical += f"-{match.group('prerelease')}"
    if match.group("build"):
        canonical += f"+{match.group('build')}"
    return Version(value=canonical)
