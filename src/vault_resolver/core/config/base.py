"""Base types and enums for configuration models."""

from enum import Enum


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class KvVersion(int, Enum):
    """Key-value secret engine API versions."""

    V1 = 1
    V2 = 2


class EnvVar(str, Enum):
    """Environment variables consulted for default options."""

    ADDR = "VAULT_ADDR"
    CACERT = "VAULT_CACERT"
    TOKEN = "VAULT_TOKEN"


REQUIRED_OPTIONS: tuple[str, ...] = ("server_url", "path")
"""Top-level options that must be present after merging."""
