"""Tests for the license file resolver."""

import pytest

from check_licenses.models import DependencySpec
from check_licenses.resolvers.license_file import (
    LicenseFileResolver,
    detect_license,
    find_license_file,
)


class TestFindLicenseFile:
    """Test suite for find_license_file."""

    @pytest.mark.parametrize(
        "filename",
        ["LICENSE", "license.md", "LICENCE.txt", "License-MIT", "UNLICENSE"],
    )
    def test_matches_spellings(self, tmp_path, filename):
        (tmp_path / filename).write_text("text")
        assert find_license_file(tmp_path) == tmp_path / filename

    def test_no_license_file(self, tmp_path):
        (tmp_path / "README.md").write_text("readme")
        assert find_license_file(tmp_path) is None

    def test_ignores_directories(self, tmp_path):
        (tmp_path / "licenses").mkdir()
        assert find_license_file(tmp_path) is None

    def test_first_by_name(self, tmp_path):
        (tmp_path / "LICENSE-MIT").write_text("mit")
        (tmp_path / "LICENSE-APACHE").write_text("apache")
        assert find_license_file(tmp_path) == tmp_path / "LICENSE-APACHE"

    def test_is_not_recursive(self, tmp_path):
        (tmp_path / "docs").mkdir()
        (tmp_path / "docs" / "LICENSE").write_text("text")
        assert find_license_file(tmp_path) is None

    def test_missing_directory(self, tmp_path):
        assert find_license_file(tmp_path / "nope") is None


class TestDetectLicense:
    """Test suite for detect_license."""

    def test_detects_mit(self, tmp_path, license_text):
        (tmp_path / "LICENSE").write_text(license_text("MIT"))
        assert detect_license(tmp_path) == ["MIT"]

    def test_detects_isc_with_licence_spelling(self, tmp_path, license_text):
        (tmp_path / "licence.txt").write_text(license_text("ISC"))
        assert detect_license(tmp_path) == ["ISC"]

    def test_unknown_text(self, tmp_path):
        (tmp_path / "LICENSE").write_text("All rights reserved.")
        assert detect_license(tmp_path) == []

    def test_no_file(self, tmp_path):
        assert detect_license(tmp_path) == []

    def test_binary_content_is_ignored(self, tmp_path):
        (tmp_path / "LICENSE").write_bytes(b"\xff\xfe\x00\x81\x9c binary")
        assert detect_license(tmp_path) == []

    def test_latin1_text_is_detected(self, tmp_path, license_text):
        text = "Copyright \u00a9 2014 Jos\u00e9 Mu\u00f1oz\n\n" + license_text("MIT")
        (tmp_path / "LICENSE").write_bytes(text.encode("latin-1"))
        assert detect_license(tmp_path) == ["MIT"]

    def test_byte_order_mark_is_tolerated(self, tmp_path, license_text):
        (tmp_path / "LICENSE").write_bytes(
            b"\xef\xbb\xbf" + license_text("MIT").encode("utf-8")
        )
        assert detect_license(tmp_path) == ["MIT"]


class TestLicenseFileResolver:
    """Test suite for LicenseFileResolver."""

    @pytest.fixture
    def resolver(self):
        return LicenseFileResolver()

    def test_resolver_name(self, resolver):
        assert resolver.name == "license-file"

    @pytest.mark.asyncio
    async def test_resolve(self, resolver, make_package, license_text):
        path = make_package("node_modules/a", license_text=license_text("ISC"))
        assert await resolver.resolve(DependencySpec(name="a", path=path)) == ["ISC"]

    @pytest.mark.asyncio
    async def test_resolve_without_path(self, resolver):
        spec = DependencySpec(name="gone", missing=True)
        assert await resolver.resolve(spec) == []
