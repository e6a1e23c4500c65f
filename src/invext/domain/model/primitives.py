"""Domain primitives: scalar aliases + small value objects."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Final

type ExtensionId = str
type ManufacturerId = str
type ClassificationId = str
type DeviceId = str

_NUMERIC: Final[str] = r"0|[1-9]\d*"
_PRERELEASE_PART: Final[str] = rf"(?:{_NUMERIC}|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_PART: Final[str] = r"[0-9a-zA-Z-]+"
_VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_PART}(?:\.{_PRERELEASE_PART})*))?"
    rf"(?:\+(?P<build>{_BUILD_PART}(?:\.{_BUILD_PART})*))?$",
    re.ASCII,
)

type _IdentifierKey = tuple[int, int, str]


class InvalidVersionError(ValueError):
    """Raised when a string is not a valid semantic version."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid semantic version: {value!r}")


@total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """Semantic version (``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``).

    Ordering follows semantic versioning precedence. Build metadata carries no
    precedence of its own but is used as the final tie-breaker, so the order is
    total and agrees with equality.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: str) -> Version:
        match = _VERSION_PATTERN.match(value.strip())
        if match is None:
            raise InvalidVersionError(value)
        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
            build=tuple(build.split(".")) if build else (),
        )

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() < other._precedence()

    def _precedence(
        self,
    ) -> tuple[int, int, int, tuple[int, tuple[_IdentifierKey, ...]], tuple[_IdentifierKey, ...]]:
        # a release outranks every pre-release of the same core version
        prerelease_key = (
            (0, tuple(_identifier_key(part) for part in self.prerelease))
            if self.prerelease
            else (1, ())
        )
        build_key = tuple(_identifier_key(part) for part in self.build)
        return (self.major, self.minor, self.patch, prerelease_key, build_key)


def _identifier_key(identifier: str) -> _IdentifierKey:
    # numeric identifiers sort numerically and below alphanumeric ones
    if identifier.isdigit():
        return (0, int(identifier), identifier)
    return (1, 0, identifier)
