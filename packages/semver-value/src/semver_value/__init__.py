# SPDX-License-Identifier: MIT
"""Immutable semantic version values.

This package provides a SemanticVersion value type that parses, renders,
serializes and orders versions following the SemVer 2.0.0 specification.

Example:
    >>> from semver_value import SemanticVersion, compare_versions, is_valid_semver
    >>>
    >>> version = SemanticVersion.parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> version.to_json()
    '"1.2.3-alpha.1+build.456"'
    >>>
    >>> is_valid_semver("1.0.0-01")
    False
    >>>
    >>> compare_versions("1.0.0-alpha", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    SemanticVersionError,
    NullArgumentError,
    FormatError,
    DeserializationError,
)
from .semver import (
    SemanticVersion,
    parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    compare_prerelease,
    version_key,
)

__all__ = [
    # Errors
    "SemanticVersionError",
    "NullArgumentError",
    "FormatError",
    "DeserializationError",
    # Version parsing
    "SemanticVersion",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "compare_prerelease",
    "version_key",
]
