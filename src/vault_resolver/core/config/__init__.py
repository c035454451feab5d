"""Configuration models, layered merging, and validation."""

from vault_resolver.core.config.base import REQUIRED_OPTIONS, EnvVar, KvVersion, LogLevel
from vault_resolver.core.config.loader import load_from_file, load_from_string
from vault_resolver.core.config.merge import env_defaults, merge_options
from vault_resolver.core.config.options import ResolvedConfig
from vault_resolver.core.config.static import StaticConfig
from vault_resolver.core.config.validator import validate_auth, validate_options

__all__ = [
    "REQUIRED_OPTIONS",
    "EnvVar",
    "KvVersion",
    "LogLevel",
    "ResolvedConfig",
    "StaticConfig",
    "env_defaults",
    "load_from_file",
    "load_from_string",
    "merge_options",
    "validate_auth",
    "validate_options",
]
