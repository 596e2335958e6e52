# SPDX-License-Identifier: MIT
"""Strict MAJOR.MINOR.PATCH version parsing and comparison.

This package provides an immutable Version value type together with a
strict parser and a total ordering over (major, minor, patch).

Example:
    >>> from strict_semver import parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3")
    >>> version.minor
    2
    >>> str(version)
    '1.2.3'
    >>>
    >>> compare_versions("1.1.1", "2.2.2")
    -1
    >>> version.newer_than(parse_version("1.2.0"))
    True
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    is_valid_version,
    FormatError,
    MAX_COMPONENT,
)
from .compare import (
    compare_versions,
    older_than,
    older_than_or_equal,
    versions_equal,
    newer_than_or_equal,
    newer_than,
    version_key,
    max_version,
    min_version,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "FormatError",
    "MAX_COMPONENT",
    # Version comparison
    "compare_versions",
    "older_than",
    "older_than_or_equal",
    "versions_equal",
    "newer_than_or_equal",
    "newer_than",
    "version_key",
    "max_version",
    "min_version",
]
