"""
Report schema for license parsing results.

Machine-readable description of what a URL parsed to, or why it
was rejected.
"""
from typing import Optional

from pydantic import BaseModel, Field

from cc_license.domain.license import License
from cc_license.domain.license_errors import LicenseParseError


class LicenseReport(BaseModel):
    """Outcome of parsing a single license URL."""

    url: str = Field(description="URL as it was given")
    valid: bool = Field(description="Whether the URL is a valid license URL")
    rights: Optional[str] = Field(
        default=None,
        description="Rights token: by, by-sa, by-nd, by-nc, by-nc-sa, by-nc-nd, zero"
    )
    version: Optional[str] = Field(
        default=None,
        description="Version: 1.0, 2.0, 2.5, 3.0, 4.0"
    )
    nomenclature: Optional[str] = Field(
        default=None,
        description="Naming era: Generic, Unported, International, Universal"
    )
    short_form: Optional[str] = Field(
        default=None,
        description="Abbreviated form, e.g. 'CC BY-NC 4.0'"
    )
    canonical_text: Optional[str] = Field(
        default=None,
        description="Full license sentence"
    )
    error: Optional[str] = Field(
        default=None,
        description="Error message when the URL was rejected"
    )
    error_kind: Optional[str] = Field(
        default=None,
        description="invalid_url, invalid_rights, invalid_version or invalid_public_domain_version"
    )

    @classmethod
    def from_license(cls, url: str, license: License) -> "LicenseReport":
        return cls(
            url=url,
            valid=True,
            rights=license.rights.token,
            version=license.version_text,
            nomenclature=license.nomenclature.value,
            short_form=license.short_form,
            canonical_text=license.canonical_text,
        )

    @classmethod
    def from_error(cls, url: str, error: LicenseParseError) -> "LicenseReport":
        return cls(
            url=str(url),
            valid=False,
            error=str(error),
            error_kind=error.kind,
        )
