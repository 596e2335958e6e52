# SPDX-License-Identifier: MIT
"""Version comparison and ordering helpers.

Versions are ordered by major, then minor, then patch. Every predicate
here is defined through compare_versions() so they cannot disagree.
"""

from __future__ import annotations

from typing import Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    if isinstance(version, Version):
        return version
    return parse_version(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        FormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.2.3", "1.2.3")
        0
        >>> compare_versions("2.2.2", "2.2.1")
        1
    """
    return _coerce(version1).compare(_coerce(version2))


def older_than(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 is strictly older than version2."""
    return compare_versions(version1, version2) == -1


def older_than_or_equal(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 is older than or equal to version2."""
    return compare_versions(version1, version2) in (-1, 0)


def versions_equal(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if both versions have the same precedence.

    ``"01.0.0"`` and ``"1.0.0"`` are equal since leading zeros are ignored.
    """
    return compare_versions(version1, version2) == 0


def newer_than_or_equal(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 is newer than or equal to version2."""
    return compare_versions(version1, version2) in (0, 1)


def newer_than(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 is strictly newer than version2."""
    return compare_versions(version1, version2) == 1


def version_key(version: VersionLike) -> tuple[int, int, int]:
    """Generate a sort key for a version.

    Args:
        version: Version string or Version object

    Returns:
        Tuple that sorts in version order

    Examples:
        >>> sorted(["2.0.0", "1.10.0", "1.9.0"], key=version_key)
        ['1.9.0', '1.10.0', '2.0.0']
    """
    v = _coerce(version)
    return (v.major, v.minor, v.patch)


def max_version(*versions: VersionLike) -> Version:
    """Return the newest of the given versions.

    Raises:
        ValueError: If no versions are given
        FormatError: If any version string is invalid
    """
    if not versions:
        raise ValueError("max_version() requires at least one version")
    return max((_coerce(v) for v in versions), key=version_key)


def min_version(*versions: VersionLike) -> Version:
    """Return the oldest of the given versions."""
    if not versions:
        raise ValueError("min_version() requires at least one version")
    return min((_coerce(v) for v in versions), key=version_key)
