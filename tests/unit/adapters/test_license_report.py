"""
Tests for LicenseReport schema.
"""
import json


class TestLicenseReport:
    """Tests for LicenseReport construction and serialization."""

    def test_from_license(self):
        """A report built from a license carries its rendered strings."""
        from cc_license.infrastructure.adapters.license_report import LicenseReport
        from cc_license.infrastructure.adapters.license_url_parser import parse_license

        url = "https://creativecommons.org/licenses/by-nc-sa/4.0/"
        report = LicenseReport.from_license(url, parse_license(url))

        assert report.valid is True
        assert report.url == url
        assert report.rights == "by-nc-sa"
        assert report.version == "4.0"
        assert report.nomenclature == "International"
        assert report.short_form == "CC BY-NC-SA 4.0"
        assert report.canonical_text.startswith("Creative Commons Attribution-NonCommercial-ShareAlike")
        assert report.error is None
        assert report.error_kind is None

    def test_from_error(self):
        """A report built from an error carries message and kind."""
        from cc_license.infrastructure.adapters.license_report import LicenseReport
        from cc_license.domain.license_errors import InvalidRightsError

        report = LicenseReport.from_error("https://x", InvalidRightsError(token="x"))

        assert report.valid is False
        assert report.error == "Invalid rights string"
        assert report.error_kind == "invalid_rights"
        assert report.short_form is None

    def test_json_serialization(self):
        """model_dump_json produces a JSON object."""
        from cc_license.infrastructure.adapters.license_report import LicenseReport
        from cc_license.domain.license_errors import InvalidUrlError

        report = LicenseReport.from_error("nope", InvalidUrlError(url="nope"))
        data = json.loads(report.model_dump_json())

        assert data["url"] == "nope"
        assert data["valid"] is False
        assert data["error_kind"] == "invalid_url"
