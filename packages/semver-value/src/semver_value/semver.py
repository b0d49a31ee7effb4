# SPDX-License-Identifier: MIT
"""Semantic version parsing and the SemanticVersion value type.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -rc.1
- Build metadata: +001, +build.123, +20130313144700
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .compare import compare_components, prerelease_key
from .errors import (
    DeserializationError,
    FormatError,
    NullArgumentError,
    SemanticVersionError,
)

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant), ASCII digits only.
# Always applied with fullmatch() so a trailing newline cannot slip past "$".
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)


@dataclass(frozen=True, slots=True, eq=False)
class SemanticVersion:
    """An immutable semantic version.

    ``SemanticVersion()`` is ``0.0.0``. Components passed to the constructor
    are taken as given: only :meth:`parse` enforces the pre-release and build
    grammar.

    Equality and ordering follow SemVer precedence, so build metadata never
    affects ``==``, ``<`` or ``hash()``.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., "alpha.1", "rc.2"), "" if none
        build: Build metadata (e.g., "build.123", "20240101"), "" if none
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    build: str = ""

    def __post_init__(self) -> None:
        for attr in ("major", "minor", "patch"):
            value = getattr(self, attr)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise FormatError(
                    value, f"Version component '{attr}' must be a non-negative integer"
                )
        if self.prerelease is None:
            object.__setattr__(self, "prerelease", "")
        if self.build is None:
            object.__setattr__(self, "build", "")

    @classmethod
    def parse(cls, version: Optional[str]) -> SemanticVersion:
        """Parse a semantic version string.

        Args:
            version: A string following semantic versioning format
                (MAJOR.MINOR.PATCH[-prerelease][+build])

        Raises:
            NullArgumentError: If ``version`` is None
            FormatError: If the string does not follow semantic versioning

        Examples:
            >>> SemanticVersion.parse("1.0.0-alpha+001")
            SemanticVersion(major=1, minor=0, patch=0, prerelease='alpha', build='001')
        """
        if version is None:
            raise NullArgumentError()

        if not isinstance(version, str):
            logger.debug("Rejected non-string version of type %s", type(version).__name__)
            raise FormatError(version, f"Version must be a string, got {type(version).__name__}")

        match = SEMVER_PATTERN.fullmatch(version) if version.strip() else None
        if not match:
            logger.debug("Rejected malformed version %r", version)
            raise FormatError(version)

        try:
            major, minor, patch = (int(match.group(g)) for g in ("major", "minor", "patch"))
        except ValueError as exc:
            # int() refuses numbers beyond sys.get_int_max_str_digits()
            raise FormatError(version, "Version component is too large") from exc

        return cls(
            major=major,
            minor=minor,
            patch=patch,
            prerelease=match.group("prerelease") or "",
            build=match.group("buildmetadata") or "",
        )

    @classmethod
    def from_json(cls, json_text: str) -> SemanticVersion:
        """Build a version from a JSON document holding a single string.

        Raises:
            DeserializationError: If the document is not valid JSON, or decodes
                to null or to anything other than a string
            FormatError: If the decoded string is not a semantic version
        """
        if json_text is None:
            raise NullArgumentError("json is null")

        try:
            value = json.loads(json_text)
        except ValueError as exc:
            raise DeserializationError(f"Invalid SemanticVersion JSON document: {exc}") from exc

        if value is None:
            raise DeserializationError("Cannot deserialize null into SemanticVersion.")
        if not isinstance(value, str):
            raise DeserializationError("Invalid SemanticVersion JSON value.")
        return cls.parse(value)

    @staticmethod
    def compare(a: SemanticVersion, b: SemanticVersion) -> int:
        """Return -1, 0 or 1 as ``a`` is lower than, equal to or higher than ``b``."""
        return compare_components(a, b)

    def compare_to(self, other: SemanticVersion) -> int:
        return compare_components(self, other)

    def equals(self, other: SemanticVersion) -> bool:
        return self.compare_to(other) == 0

    def lt(self, other: SemanticVersion) -> bool:
        return self.compare_to(other) < 0

    def lte(self, other: SemanticVersion) -> bool:
        return self.compare_to(other) <= 0

    def gt(self, other: SemanticVersion) -> bool:
        return self.compare_to(other) > 0

    def gte(self, other: SemanticVersion) -> bool:
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.gte(other)

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, prerelease_key(self.prerelease)))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    def to_string(self) -> str:
        return str(self)

    def to_json(self) -> str:
        """Return the version as a JSON string scalar, e.g. ``'"1.2.3"'``."""
        return json.dumps(str(self))

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        # Validated from a version string, dumped back to the canonical string.
        from_str = core_schema.no_info_after_validator_function(cls.parse, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.to_string_ser_schema(when_used="always"),
        )


def parse_version(version_string: Optional[str]) -> SemanticVersion:
    """Parse a semantic version string into a SemanticVersion object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A SemanticVersion object with parsed components

    Raises:
        NullArgumentError: If version_string is None
        FormatError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        SemanticVersion(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("1.0.0-x.7.z.92")
        SemanticVersion(major=1, minor=0, patch=0, prerelease='x.7.z.92', build='')

        >>> parse_version("1.0.0+20130313144700")
        SemanticVersion(major=1, minor=0, patch=0, prerelease='', build='20130313144700')
    """
    return SemanticVersion.parse(version_string)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver(" 1.0.0")
        False
    """
    try:
        SemanticVersion.parse(version_string)
    except SemanticVersionError:
        return False
    return True
