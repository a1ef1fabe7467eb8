"""
License parsing error hierarchy.

Every failure is a deterministic consequence of the input, so none
of these errors is worth retrying.
"""


class LicenseParseError(ValueError):
    """Base class for Creative Commons license parsing errors."""

    kind = "parse_error"
    default_message = "Invalid license"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class InvalidUrlError(LicenseParseError):
    """Input does not have the shape of a Creative Commons license URL."""

    kind = "invalid_url"
    default_message = "Invalid URL"

    def __init__(self, message: str = "", url: object = ""):
        super().__init__(message)
        self.url = url


class InvalidRightsError(LicenseParseError):
    """Rights segment is not one of the recognized tokens."""

    kind = "invalid_rights"
    default_message = "Invalid rights string"

    def __init__(self, message: str = "", token: object = ""):
        super().__init__(message)
        self.token = token


class InvalidVersionError(LicenseParseError):
    """Version segment is not one of the recognized versions."""

    kind = "invalid_version"
    default_message = "Invalid version string"

    def __init__(self, message: str = "", token: object = ""):
        super().__init__(message)
        self.token = token


class InvalidPublicDomainVersionError(LicenseParseError):
    """CC0 was requested with a version other than 1.0."""

    kind = "invalid_public_domain_version"
    default_message = "The version of CC0 licenses must be 1.0"

    def __init__(self, message: str = "", version: str = ""):
        super().__init__(message)
        self.version = version
