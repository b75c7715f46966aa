"""
Configuration management for SubnetKit.

Loads CLI settings from environment variables or a .env file. The IP engine
itself never reads configuration.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

OUTPUT_FORMATS = ("table", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Check common locations for .env
ENV_LOCATIONS = [
    Path.home() / ".subnetkit" / ".env",
    Path.home() / ".config" / "subnetkit" / ".env",
    Path.cwd() / ".env",
]


def load_env_file() -> Path | None:
    """Load the first .env file found, returning its path."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class SubnetKitConfig:
    """Settings for the command line surface."""

    log_level: str = "WARNING"
    log_file: str | None = None

    # "table" renders rich tables, "json" prints raw records
    output_format: str = "table"

    # Maximum number of subnets printed by `ip split`
    split_display_limit: int = 256

    @classmethod
    def from_env(cls) -> "SubnetKitConfig":
        """Load configuration from environment variables."""
        output_format = os.getenv("SUBNETKIT_OUTPUT", "table").lower()
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"SUBNETKIT_OUTPUT must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}"
            )

        log_level = os.getenv("SUBNETKIT_LOG_LEVEL", "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"SUBNETKIT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        limit = os.getenv("SUBNETKIT_SPLIT_LIMIT", "256")
        try:
            split_display_limit = int(limit)
        except ValueError:
            raise ValueError(f"SUBNETKIT_SPLIT_LIMIT must be an integer, got {limit!r}") from None
        if split_display_limit < 0:
            raise ValueError(f"SUBNETKIT_SPLIT_LIMIT must not be negative, got {split_display_limit}")

        return cls(
            log_level=log_level,
            log_file=os.getenv("SUBNETKIT_LOG_FILE") or None,
            output_format=output_format,
            split_display_limit=split_display_limit,
        )


# Global config instance
_config: SubnetKitConfig | None = None


def get_config() -> SubnetKitConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        load_env_file()
        _config = SubnetKitConfig.from_env()
    return _config


def set_config(config: SubnetKitConfig | None) -> None:
    """Set (or with None, reset) the global configuration instance."""
    global _config
    _config = config
