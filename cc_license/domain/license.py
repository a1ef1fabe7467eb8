"""
Creative Commons License aggregate.

A License pairs a RightsCode with a VersionCode. The pair is validated
once, on construction, so every existing instance is a valid license.
"""
from dataclasses import dataclass
from typing import Dict

from cc_license.domain.license_errors import InvalidPublicDomainVersionError
from cc_license.domain.license_value_objects import (
    Nomenclature,
    RightsCode,
    VersionCode,
)

CANONICAL_HOST = "https://creativecommons.org"


@dataclass(frozen=True)
class License:
    """
    Immutable Creative Commons license.

    Usage:
        license = License.from_url("https://creativecommons.org/licenses/by-nc/4.0/")
        license.short_form      # 'CC BY-NC 4.0'
        str(license)            # full canonical sentence

    Raises:
        InvalidPublicDomainVersionError: If CC0 is paired with a version other than 1.0
    """
    rights: RightsCode
    version: VersionCode

    def __post_init__(self):
        if not isinstance(self.rights, RightsCode):
            raise TypeError(f"rights must be a RightsCode, got {type(self.rights).__name__}")
        if not isinstance(self.version, VersionCode):
            raise TypeError(f"version must be a VersionCode, got {type(self.version).__name__}")
        self.check()

    def check(self) -> None:
        """Validate the pair. CC0 only exists at version 1.0."""
        if self.rights is RightsCode.PUBLIC_DOMAIN_ZERO and self.version is not VersionCode.V1_0:
            raise InvalidPublicDomainVersionError(version=self.version.value)

    @classmethod
    def from_url(cls, url: str) -> "License":
        """Parse a license from its creativecommons.org URL."""
        from cc_license.infrastructure.adapters.license_url_parser import parse_license

        return parse_license(url)

    @property
    def rights_abbreviation(self) -> str:
        return self.rights.abbreviation

    @property
    def rights_full_text(self) -> str:
        return self.rights.full_text

    @property
    def version_text(self) -> str:
        return self.version.text

    @property
    def nomenclature(self) -> Nomenclature:
        return Nomenclature.derive(self.rights, self.version)

    @property
    def short_form(self) -> str:
        """Abbreviated form, e.g. 'CC BY-NC 4.0'."""
        return f"{self.rights_abbreviation} {self.version_text}"

    @property
    def canonical_text(self) -> str:
        """Full license sentence, e.g. 'Creative Commons Attribution 4.0 International license (CC BY 4.0).'"""
        return (
            f"Creative Commons {self.rights_full_text} {self.version_text} "
            f"{self.nomenclature} license ({self.short_form})."
        )

    @property
    def url(self) -> str:
        """Canonical https URL of the license deed."""
        section = "publicdomain" if self.rights is RightsCode.PUBLIC_DOMAIN_ZERO else "licenses"
        return f"{CANONICAL_HOST}/{section}/{self.rights.token}/{self.version_text}/"

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for serialization."""
        return {
            "rights": self.rights.token,
            "version": self.version_text,
            "nomenclature": self.nomenclature.value,
            "short_form": self.short_form,
            "canonical_text": self.canonical_text,
            "url": self.url,
        }

    def __str__(self) -> str:
        return self.canonical_text
