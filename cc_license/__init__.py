"""
Parse Creative Commons license URLs.

    >>> from cc_license import parse_license
    >>> license = parse_license("https://creativecommons.org/licenses/by-nc-sa/4.0/")
    >>> license.canonical_text
    'Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International license (CC BY-NC-SA 4.0).'
"""
from cc_license.domain.license import License
from cc_license.domain.license_errors import (
    InvalidPublicDomainVersionError,
    InvalidRightsError,
    InvalidUrlError,
    InvalidVersionError,
    LicenseParseError,
)
from cc_license.domain.license_value_objects import Nomenclature, RightsCode, VersionCode
from cc_license.infrastructure.adapters.license_url_parser import (
    is_license_url,
    match_license_url,
    parse_license,
)

__version__ = "0.1.0"

__all__ = [
    "License",
    "LicenseParseError",
    "InvalidUrlError",
    "InvalidRightsError",
    "InvalidVersionError",
    "InvalidPublicDomainVersionError",
    "Nomenclature",
    "RightsCode",
    "VersionCode",
    "is_license_url",
    "match_license_url",
    "parse_license",
]
