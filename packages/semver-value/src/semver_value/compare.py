# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence rules.

Precedence is decided by MAJOR, MINOR and PATCH, then by the pre-release
identifiers. A release has higher precedence than any of its pre-releases:

    1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta
    < 1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0

Build metadata is ignored in comparisons per SemVer 2.0.0.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .semver import SemanticVersion

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _is_numeric(identifier: str) -> bool:
    return _NUMERIC_IDENTIFIER.fullmatch(identifier) is not None


def _numeric_key(identifier: str) -> tuple[int, str]:
    """Order digit strings by value without int() and its digit limit."""
    digits = identifier.lstrip("0")
    return (len(digits), digits)


def compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    An empty string means "no pre-release", which has higher precedence
    than any pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        is_num1 = _is_numeric(p1)
        is_num2 = _is_numeric(p2)

        if is_num1 and is_num2:
            n1, n2 = _numeric_key(p1), _numeric_key(p2)
            if n1 != n2:
                return -1 if n1 < n2 else 1
        elif is_num1:
            # Numeric < alphanumeric per SemVer
            return -1
        elif is_num2:
            return 1
        elif p1 != p2:
            return -1 if p1 < p2 else 1

    # All compared parts equal - longer pre-release has higher precedence
    return _sign(len(parts1) - len(parts2))


def compare_components(v1: SemanticVersion, v2: SemanticVersion) -> int:
    """Three-way comparison of two parsed versions, ignoring build metadata."""
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr) - getattr(v2, attr))
        if result:
            return result

    return compare_prerelease(v1.prerelease, v2.prerelease)


def prerelease_key(prerelease: str) -> tuple:
    """Return a sort key for a pre-release string.

    Releases become ``(1,)`` so they sort after every pre-release, which
    becomes ``(0, parts)``. Numeric identifiers sort before alphanumeric ones.
    """
    if not prerelease:
        return (1,)

    parts = []
    for part in prerelease.split("."):
        if _is_numeric(part):
            parts.append((0, _numeric_key(part), ""))
        else:
            parts.append((1, (0, ""), part))
    return (0, tuple(parts))


def _coerce(version: Union[str, SemanticVersion]) -> SemanticVersion:
    # semver imports this module, so the parser is looked up lazily
    from .semver import parse_version

    return parse_version(version) if isinstance(version, str) else version


def compare_versions(
    version1: Union[str, SemanticVersion], version2: Union[str, SemanticVersion]
) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or SemanticVersion object)
        version2: Second version (string or SemanticVersion object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        FormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return compare_components(_coerce(version1), _coerce(version2))


def version_key(version: Union[str, SemanticVersion]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Two versions have equal keys exactly when they compare equal.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)
    return (v.major, v.minor, v.patch, prerelease_key(v.prerelease))
