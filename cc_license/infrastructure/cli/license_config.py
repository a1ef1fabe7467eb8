"""
cc-license CLI configuration and settings.

Centralizes configuration for the command line, including default
values and environment variables.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional
import os

from cc_license.infrastructure.logging.license_logger import LOG_LEVELS


# Output formats for the parse command
AVAILABLE_FORMATS = [
    "canonical",  # Creative Commons Attribution 4.0 International license (CC BY 4.0).
    "short",      # CC BY 4.0
    "json",       # one LicenseReport per line
]


@dataclass(frozen=True)
class LicenseCliConfig:
    """Configuration for cc-license CLI operations."""

    output_format: str = "canonical"

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.output_format not in AVAILABLE_FORMATS:
            raise ValueError(
                f"Invalid output format: {self.output_format} "
                f"(expected one of {', '.join(AVAILABLE_FORMATS)})"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> 'LicenseCliConfig':
        """Create config from environment variables."""
        return cls(
            output_format=os.getenv("CC_LICENSE_OUTPUT_FORMAT", "canonical").lower(),
            log_level=os.getenv("CC_LICENSE_LOG_LEVEL", "WARNING").upper(),
            log_json=os.getenv("CC_LICENSE_LOG_JSON", "false").lower() == "true",
            log_file=os.getenv("CC_LICENSE_LOG_FILE") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display."""
        return {
            "output_format": self.output_format,
            "log_level": self.log_level,
            "log_json": self.log_json,
            "log_file": self.log_file,
        }
