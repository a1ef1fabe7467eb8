"""
Parser for Creative Commons license URLs.

Recognizes https://creativecommons.org/licenses/<rights>/<version>/
(and the publicdomain variant) and turns it into a License.
"""
import logging
import re
from typing import Iterable, List, Optional, Tuple

from cc_license.domain.license import License
from cc_license.domain.license_errors import InvalidUrlError, LicenseParseError
from cc_license.domain.license_value_objects import RightsCode, VersionCode
from cc_license.infrastructure.adapters.license_report import LicenseReport

logger = logging.getLogger(__name__)

# Matched with fullmatch: nothing may precede the scheme or follow the version
CC_URL_PATTERN = re.compile(
    r"https?://(www\.)?creativecommons\.org/"
    r"(licenses|publicdomain)/"
    r"(?P<rights>[^/]+)/(?P<version>[^/]+)/?"
)


def match_license_url(url: str) -> Tuple[str, str]:
    """
    Extract the raw rights and version tokens from a license URL.

    The tokens are returned verbatim; they are not checked against
    the known rights and versions.

    Args:
        url: Candidate license URL

    Returns:
        (rights_token, version_token)

    Raises:
        InvalidUrlError: If the URL does not have the expected shape
    """
    if not isinstance(url, str):
        raise InvalidUrlError(url=url)

    match = CC_URL_PATTERN.fullmatch(url)
    if not match:
        raise InvalidUrlError(url=url)

    return match.group("rights"), match.group("version")


def parse_license(url: str) -> License:
    """
    Parse a Creative Commons license URL.

    Each step fails fast with its own error, in this order:
    URL shape, rights token, version token, CC0 version.

    Raises:
        InvalidUrlError: URL shape not recognized
        InvalidRightsError: Unknown rights token
        InvalidVersionError: Unknown version token
        InvalidPublicDomainVersionError: CC0 with a version other than 1.0
    """
    rights_token, version_token = match_license_url(url)
    rights = RightsCode.from_token(rights_token)
    version = VersionCode.from_token(version_token)

    license = License(rights=rights, version=version)
    logger.debug(f"Parsed {url!r} as {license.short_form}")
    return license


def is_license_url(url: str) -> bool:
    """Check whether a URL parses as a valid license."""
    try:
        parse_license(url)
    except LicenseParseError:
        return False
    return True


def try_parse_license(url: str) -> Optional[License]:
    """Parse a license URL, returning None if it is not valid."""
    try:
        return parse_license(url)
    except LicenseParseError as e:
        logger.debug(f"Rejected {url!r}: {e}")
        return None


def parse_licenses(urls: Iterable[str]) -> List[LicenseReport]:
    """
    Parse several URLs, reporting the outcome of each one.

    Invalid URLs do not stop the batch; they produce a report
    carrying the error instead of a license.
    """
    reports = []
    for url in urls:
        try:
            license = parse_license(url)
        except LicenseParseError as e:
            logger.debug(f"Rejected {url!r}: {e}")
            reports.append(LicenseReport.from_error(url, e))
        else:
            reports.append(LicenseReport.from_license(url, license))
    return reports
