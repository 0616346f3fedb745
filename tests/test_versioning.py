"""
Tests for semantic versions and version ranges.
"""

import pytest

from dsfilter.exceptions import InvalidConstraintError, InvalidVersionError
from dsfilter.versioning import Version, VersionRange


class TestVersion:
    """Tests for Version parsing and ordering."""

    def test_parse_full(self):
        v = Version.parse("7.6.0-SNAPSHOT+build.5")
        assert (v.major, v.minor, v.patch) == (7, 6, 0)
        assert v.prerelease == "SNAPSHOT"
        assert v.metadata == "build.5"
        assert str(v) == "7.6.0-SNAPSHOT+build.5"

    def test_parse_lenient(self):
        assert Version.parse("v1.2") == Version(1, 2, 0)
        assert Version.parse("7") == Version(7, 0, 0)
        assert Version.parse(" 6.8.0 ") == Version(6, 8, 0)

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3.4", "1..2", "-1.0.0", "1.0.0-"])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidVersionError) as exc:
            Version.parse(text)
        assert str(exc.value) == f"version '{text}' is invalid"

    def test_ordering(self):
        ordered = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
            "1.0.1",
            "1.1.0",
            "2.0.0",
        ]
        versions = [Version.parse(v) for v in ordered]
        assert sorted(reversed(versions)) == versions

    def test_metadata_ignored(self):
        assert Version.parse("1.0.0+a") == Version.parse("1.0.0+b")
        assert hash(Version.parse("1.0.0+a")) == hash(Version.parse("1.0.0"))


class TestVersionRange:
    """Tests for VersionRange parsing and matching."""

    @pytest.mark.parametrize("version_range,version,expected", [
        (">=7.0.0", "6.8.0", False),
        (">=7.0.0", "7.0.0", True),
        ("=>7.0.0", "7.0.1", True),
        ("<8", "7.9.9", True),
        (">=6.8, <7.0", "6.9.1", True),
        (">=6.8 <7.0", "7.0.0", False),
        ("7.6.0", "7.6.0", True),
        ("!=1.2.3", "1.2.3", False),
        ("~1.2.3", "1.2.9", True),
        ("~>1.2.3", "1.3.0", False),
        ("~1", "1.9.0", True),
        ("^1.2.0", "1.9.0", True),
        ("^1.2.0", "2.0.0", False),
        ("1.2.x", "1.2.7", True),
        ("1.2.x", "1.3.0", False),
        ("=7", "7.5.0", True),
        (">7.x", "8.0.0", True),
        (">7.x", "7.9.0", False),
        ("<=7.x", "7.9.0", True),
        ("<=7.x", "8.0.0", False),
        ("*", "0.0.1", True),
        ("1.2 - 1.4.5", "1.4.5", True),
        ("1.2 - 1.4.5", "1.4.6", False),
        ("<1.0.0 || ^3", "3.1.0", True),
        ("<1.0.0 || ^3", "2.0.0", False),
        (">=7.0.0", "8.0.0-SNAPSHOT", False),
        (">=7.0.0-0", "8.0.0-SNAPSHOT", True),
    ])
    def test_check(self, version_range, version, expected):
        assert VersionRange.parse(version_range).check(Version.parse(version)) is expected

    def test_validate_reasons(self):
        ok, reasons = VersionRange.parse(">=7.0.0").validate(Version.parse("6.8.0"))
        assert ok is False
        assert reasons == ["6.8.0 does not satisfy >=7.0.0"]

    def test_validate_match(self):
        assert VersionRange.parse(">=7.0.0").validate(Version.parse("7.1.0")) == (True, [])

    @pytest.mark.parametrize("text", ["", "abc", ">>1", "1.2.3 ||", ">=1.x.y"])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidConstraintError) as exc:
            VersionRange.parse(text)
        assert str(exc.value) == f"constraint '{text}' is invalid"
