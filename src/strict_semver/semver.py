# SPDX-License-Identifier: MIT
"""Semantic version parsing for MAJOR.MINOR.PATCH identifiers.

Only the three numeric components are supported. Pre-release and build
metadata suffixes are rejected like any other malformed segment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Components are unsigned 64-bit integers
MAX_COMPONENT = 2**64 - 1
_MAX_COMPONENT_DIGITS = len(str(MAX_COMPONENT))

# ASCII digits only; int() alone would also accept whitespace, signs,
# underscores and non-ASCII digits
_NUMERIC_PATTERN = re.compile(r"[0-9]+")

_COMPONENTS = ("major", "minor", "patch")


class FormatError(ValueError):
    """Raised when a string cannot be parsed into a Version.

    Attributes:
        version: The offending input (the whole string, or the bad segment)
        component: "major", "minor" or "patch", or None when the string as a
            whole is malformed
        message: Human-readable description of the failure
    """

    def __init__(self, version: str, message: str = "", component: Optional[str] = None):
        self.version = version
        self.component = component
        self.message = message or f"invalid version string: {version}"
        super().__init__(self.message)


def _check_component(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful version number
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= MAX_COMPONENT:
        raise ValueError(f"{name} must be between 0 and {MAX_COMPONENT}, got {value}")


@dataclass(frozen=True, slots=True, order=True)
class Version:
    """An immutable MAJOR.MINOR.PATCH version.

    Instances order lexicographically by (major, minor, patch), so the
    builtin comparison operators, ``sorted`` and ``max`` work directly.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in _COMPONENTS:
            _check_component(name, getattr(self, name))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_str(self) -> str:
        """Return the version as MAJOR.MINOR.PATCH. Same as str()."""
        return str(self)

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a version string. Alias for parse_version()."""
        return parse_version(version_string)

    def compare(self, other: Version) -> int:
        """Three-way compare against another version.

        Returns:
            -1 if this version is older than ``other``, 0 if they are equal,
            1 if this version is newer
        """
        if self.major != other.major:
            return -1 if self.major < other.major else 1
        if self.minor != other.minor:
            return -1 if self.minor < other.minor else 1
        if self.patch != other.patch:
            return -1 if self.patch < other.patch else 1
        return 0

    def older_than(self, other: Version) -> bool:
        """Return True if this version is strictly older than other."""
        return self.compare(other) == -1

    def older_than_or_equal(self, other: Version) -> bool:
        """Return True if this version is older than or equal to other."""
        return self.compare(other) in (-1, 0)

    def equals(self, other: Version) -> bool:
        """Return True if this version has the same precedence as other."""
        return self.compare(other) == 0

    def newer_than_or_equal(self, other: Version) -> bool:
        """Return True if this version is newer than or equal to other."""
        return self.compare(other) in (0, 1)

    def newer_than(self, other: Version) -> bool:
        """Return True if this version is strictly newer than other."""
        return self.compare(other) == 1


def _parse_component(name: str, segment: str) -> int:
    if not _NUMERIC_PATTERN.fullmatch(segment):
        raise FormatError(segment, f"invalid {name} version: {segment}", component=name)
    # Strip leading zeros and bound the length before int(), which refuses
    # strings longer than sys.get_int_max_str_digits()
    digits = segment.lstrip("0") or "0"
    if len(digits) > _MAX_COMPONENT_DIGITS or int(digits) > MAX_COMPONENT:
        raise FormatError(segment, f"invalid {name} version: {segment}", component=name)
    return int(digits)


def parse_version(version_string: str) -> Version:
    """Parse a MAJOR.MINOR.PATCH string into a Version object.

    Each component must be a non-empty run of ASCII digits no larger than
    ``MAX_COMPONENT``. Leading zeros are accepted and ignored. The input is
    not trimmed.

    Args:
        version_string: A string in MAJOR.MINOR.PATCH format

    Returns:
        A Version object with parsed components

    Raises:
        FormatError: If the string does not have exactly three dot-separated
            segments, or a segment is not a valid non-negative integer

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3)

        >>> parse_version("1.2.c")
        Traceback (most recent call last):
            ...
        strict_semver.semver.FormatError: invalid patch version: c
    """
    if not isinstance(version_string, str):
        raise FormatError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    parts = version_string.split(".")
    if len(parts) != 3:
        raise FormatError(version_string)

    major, minor, patch = (
        _parse_component(name, segment) for name, segment in zip(_COMPONENTS, parts)
    )
    return Version(major=major, minor=minor, patch=patch)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid MAJOR.MINOR.PATCH version.

    Examples:
        >>> is_valid_version("1.0.0")
        True
        >>> is_valid_version("1.0")
        False
    """
    try:
        parse_version(version_string)
    except FormatError:
        return False
    return True
