"""
Creative Commons License Value Objects

Closed enumerations describing a Creative Commons license: the rights
granted, the license version and the naming era of that version.
Display strings live in lookup tables next to each enumeration.
"""
from enum import Enum

from cc_license.domain.license_errors import InvalidRightsError, InvalidVersionError


class RightsCode(Enum):
    """
    Rights granted by the license.

    Values are the path tokens used in creativecommons.org URLs.
    """
    ATTRIBUTION = "by"
    ATTRIBUTION_SHARE_ALIKE = "by-sa"
    ATTRIBUTION_NO_DERIVATIVES = "by-nd"
    ATTRIBUTION_NON_COMMERCIAL = "by-nc"
    ATTRIBUTION_NON_COMMERCIAL_SHARE_ALIKE = "by-nc-sa"
    ATTRIBUTION_NON_COMMERCIAL_NO_DERIVATIVES = "by-nc-nd"
    PUBLIC_DOMAIN_ZERO = "zero"

    @classmethod
    def from_token(cls, token: str) -> "RightsCode":
        """
        Decode a URL rights token.

        Matching is exact and case-sensitive: "by" is accepted,
        "BY" and " by" are not.

        Raises:
            InvalidRightsError: If the token is not a known rights code
        """
        if isinstance(token, str):
            for rights in cls:
                if rights.value == token:
                    return rights
        raise InvalidRightsError(token=token)

    @property
    def token(self) -> str:
        return self.value

    @property
    def abbreviation(self) -> str:
        """Short display form, e.g. 'CC BY-NC-SA'."""
        return _RIGHTS_ABBREVIATIONS[self]

    @property
    def full_text(self) -> str:
        """Long display form, e.g. 'Attribution-NonCommercial-ShareAlike'."""
        return _RIGHTS_FULL_TEXTS[self]

    def __str__(self) -> str:
        return self.abbreviation


_RIGHTS_ABBREVIATIONS = {
    RightsCode.ATTRIBUTION: "CC BY",
    RightsCode.ATTRIBUTION_SHARE_ALIKE: "CC BY-SA",
    RightsCode.ATTRIBUTION_NO_DERIVATIVES: "CC BY-ND",
    RightsCode.ATTRIBUTION_NON_COMMERCIAL: "CC BY-NC",
    RightsCode.ATTRIBUTION_NON_COMMERCIAL_SHARE_ALIKE: "CC BY-NC-SA",
    RightsCode.ATTRIBUTION_NON_COMMERCIAL_NO_DERIVATIVES: "CC BY-NC-ND",
    RightsCode.PUBLIC_DOMAIN_ZERO: "CC0",
}

_RIGHTS_FULL_TEXTS = {
    RightsCode.ATTRIBUTION: "Attribution",
    RightsCode.ATTRIBUTION_SHARE_ALIKE: "Attribution-ShareAlike",
    RightsCode.ATTRIBUTION_NO_DERIVATIVES: "Attribution-NoDerivatives",
    RightsCode.ATTRIBUTION_NON_COMMERCIAL: "Attribution-NonCommercial",
    RightsCode.ATTRIBUTION_NON_COMMERCIAL_SHARE_ALIKE: "Attribution-NonCommercial-ShareAlike",
    RightsCode.ATTRIBUTION_NON_COMMERCIAL_NO_DERIVATIVES: "Attribution-NonCommercial-NoDerivatives",
    RightsCode.PUBLIC_DOMAIN_ZERO: "CC0",
}


class VersionCode(Enum):
    """
    License version.

    Values are the decimal strings used in creativecommons.org URLs.
    """
    V1_0 = "1.0"
    V2_0 = "2.0"
    V2_5 = "2.5"
    V3_0 = "3.0"
    V4_0 = "4.0"

    @classmethod
    def from_token(cls, token: str) -> "VersionCode":
        """
        Decode a URL version token.

        "1" and "4.5" are rejected even though they look numeric.

        Raises:
            InvalidVersionError: If the token is not a known version
        """
        if isinstance(token, str):
            for version in cls:
                if version.value == token:
                    return version
        raise InvalidVersionError(token=token)

    @property
    def text(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Nomenclature(Enum):
    """
    Naming era used to qualify a version in the license title.
    """
    GENERIC = "Generic"
    UNPORTED = "Unported"
    INTERNATIONAL = "International"
    UNIVERSAL = "Universal"

    @classmethod
    def derive(cls, rights: RightsCode, version: VersionCode) -> "Nomenclature":
        """
        Derive the naming era of a (rights, version) pair.

        CC0 is always Universal; every other license is named after
        its version.
        """
        if rights is RightsCode.PUBLIC_DOMAIN_ZERO:
            return cls.UNIVERSAL
        return _NOMENCLATURE_BY_VERSION[version]

    def __str__(self) -> str:
        return self.value


# Naming of every non-CC0 license; one entry per VersionCode member
_NOMENCLATURE_BY_VERSION = {
    VersionCode.V1_0: Nomenclature.GENERIC,
    VersionCode.V2_0: Nomenclature.GENERIC,
    VersionCode.V2_5: Nomenclature.GENERIC,
    VersionCode.V3_0: Nomenclature.UNPORTED,
    VersionCode.V4_0: Nomenclature.INTERNATIONAL,
}
