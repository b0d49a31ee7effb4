# SPDX-License-Identifier: MIT
"""Exceptions raised while building a SemanticVersion."""

from __future__ import annotations


class SemanticVersionError(Exception):
    """Base class for all semantic version errors."""


class NullArgumentError(SemanticVersionError, TypeError):
    """Raised when no version text was supplied at all (``None``)."""

    def __init__(self, message: str = "version is null"):
        self.message = message
        super().__init__(message)


class FormatError(SemanticVersionError, ValueError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: object, message: str = "Invalid semantic version format"):
        self.version = version
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message}: {self.version!r}"


class DeserializationError(SemanticVersionError, ValueError):
    """Raised when a JSON document does not hold a version string."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
