"""
Configuration module for environment variable validation and type-safe config.

This module validates the environment variables the service clients read
and provides a type-safe configuration object.
"""
import os
from dataclasses import dataclass
from typing import Optional


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_RETRY_MODES = {"legacy", "standard", "adaptive"}


def _parse_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got: {raw}")


def _parse_positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw}") from None
    if value < 1:
        raise ValueError(f"{name} must be greater than zero, got: {value}")
    return value


def _parse_positive_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw}") from None
    if value <= 0:
        raise ValueError(f"{name} must be greater than zero, got: {value}")
    return value


@dataclass
class Config:
    """Type-safe configuration object with validated environment variables."""

    aws_region: str = "us-east-1"
    endpoint_url: Optional[str] = None
    use_fips_endpoint: bool = False
    use_dualstack_endpoint: bool = False
    max_attempts: int = 3
    retry_mode: str = "standard"
    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    max_workers: int = 8
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If an environment variable is present but invalid.
        """
        aws_region = os.environ.get("AWS_REGION", "us-east-1")
        if not aws_region:
            raise ValueError("AWS_REGION environment variable must not be empty")

        endpoint_url = os.environ.get("AWS_ENDPOINT_URL") or None

        retry_mode = os.environ.get("AWS_RETRY_MODE", "standard").lower()
        if retry_mode not in VALID_RETRY_MODES:
            raise ValueError(
                f"AWS_RETRY_MODE must be one of {VALID_RETRY_MODES}, got: {retry_mode}"
            )

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Validate log level
        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {log_level}"
            )

        return cls(
            aws_region=aws_region,
            endpoint_url=endpoint_url,
            use_fips_endpoint=_parse_bool("AWS_USE_FIPS_ENDPOINT"),
            use_dualstack_endpoint=_parse_bool("AWS_USE_DUALSTACK_ENDPOINT"),
            max_attempts=_parse_positive_int("AWS_MAX_ATTEMPTS", 3),
            retry_mode=retry_mode,
            connect_timeout=_parse_positive_float("SDK_CONNECT_TIMEOUT", 10.0),
            read_timeout=_parse_positive_float("SDK_READ_TIMEOUT", 30.0),
            max_workers=_parse_positive_int("SDK_MAX_WORKERS", 8),
            log_level=log_level,
        )


# Global config instance - initialized on first use
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ValueError: If environment variables are invalid.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config
