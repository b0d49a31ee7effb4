# SPDX-License-Identifier: MIT
"""Property-based tests for semantic version parsing and ordering.

These tests verify that:
- Rendering a parsed version reproduces the input text
- JSON round-trips preserve equality
- compare_to is a total order (reflexive, antisymmetric, transitive)
- Equality and hashing ignore build metadata
- version_key sorts exactly like compare_to
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semver_value import (
    SemanticVersion,
    compare_versions,
    is_valid_semver,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numeric_components = st.integers(min_value=0, max_value=10_000)

numeric_identifiers = st.integers(min_value=0, max_value=10_000).map(str)
alphanumeric_identifiers = st.from_regex(r"[0-9]{0,2}[a-zA-Z-][0-9a-zA-Z-]{0,6}", fullmatch=True)
prerelease_identifiers = st.one_of(numeric_identifiers, alphanumeric_identifiers)
build_identifiers = st.from_regex(r"[0-9a-zA-Z-]{1,8}", fullmatch=True)

prereleases = st.one_of(
    st.just(""),
    st.lists(prerelease_identifiers, min_size=1, max_size=4).map(".".join),
)
builds = st.one_of(
    st.just(""),
    st.lists(build_identifiers, min_size=1, max_size=3).map(".".join),
)


@st.composite
def version_strings(draw) -> str:
    """Generate valid SemVer 2.0.0 strings."""
    text = ".".join(str(draw(numeric_components)) for _ in range(3))
    prerelease = draw(prereleases)
    build = draw(builds)
    if prerelease:
        text += f"-{prerelease}"
    if build:
        text += f"+{build}"
    return text


versions = version_strings().map(parse_version)


# =============================================================================
# Round-trip properties
# =============================================================================


class TestRoundTrip:
    """Rendering and JSON encoding are lossless."""

    @given(text=version_strings())
    @settings(max_examples=200)
    def test_str_reproduces_input(self, text: str):
        assert is_valid_semver(text)
        assert str(parse_version(text)) == text

    @given(text=version_strings())
    @settings(max_examples=200)
    def test_json_round_trip(self, text: str):
        version = parse_version(text)
        restored = SemanticVersion.from_json(version.to_json())
        assert restored.compare_to(version) == 0
        assert restored.build == version.build

    @given(
        major=numeric_components,
        minor=numeric_components,
        patch=numeric_components,
        prerelease=prereleases,
        build=builds,
    )
    def test_components_render_and_parse(self, major, minor, patch, prerelease, build):
        version = SemanticVersion(major, minor, patch, prerelease, build)
        parsed = parse_version(str(version))
        assert (parsed.major, parsed.minor, parsed.patch) == (major, minor, patch)
        assert (parsed.prerelease, parsed.build) == (prerelease, build)


# =============================================================================
# Ordering properties
# =============================================================================


class TestOrdering:
    """compare_to defines a total order."""

    @given(v=versions)
    def test_reflexive(self, v: SemanticVersion):
        assert v.compare_to(v) == 0
        assert v == v

    @given(a=versions, b=versions)
    @settings(max_examples=200)
    def test_antisymmetric(self, a: SemanticVersion, b: SemanticVersion):
        assert a.compare_to(b) == -b.compare_to(a)
        assert a.compare_to(b) in (-1, 0, 1)

    @given(a=versions, b=versions, c=versions)
    @settings(max_examples=200)
    def test_transitive(self, a: SemanticVersion, b: SemanticVersion, c: SemanticVersion):
        low, mid, high = sorted([a, b, c])
        assert low.lte(mid) and mid.lte(high)
        assert low.lte(high)

    @given(a=versions, b=versions)
    @settings(max_examples=200)
    def test_key_agrees_with_compare(self, a: SemanticVersion, b: SemanticVersion):
        key_a, key_b = version_key(a), version_key(b)
        expected = (key_a > key_b) - (key_a < key_b)
        assert a.compare_to(b) == expected
        assert compare_versions(str(a), str(b)) == expected

    @given(v=versions)
    def test_release_above_prerelease(self, v: SemanticVersion):
        release = SemanticVersion(v.major, v.minor, v.patch)
        if v.is_prerelease:
            assert v < release
        else:
            assert v == release


# =============================================================================
# Build metadata properties
# =============================================================================


class TestBuildMetadata:
    """Build metadata never takes part in equality."""

    @given(
        major=numeric_components,
        minor=numeric_components,
        patch=numeric_components,
        prerelease=prereleases,
        build1=builds,
        build2=builds,
    )
    def test_equality_ignores_build(self, major, minor, patch, prerelease, build1, build2):
        a = SemanticVersion(major, minor, patch, prerelease, build1)
        b = SemanticVersion(major, minor, patch, prerelease, build2)
        assert a.equals(b)
        assert a == b
        assert hash(a) == hash(b)
