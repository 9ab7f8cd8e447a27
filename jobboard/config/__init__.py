"""
Configuration package: environment-specific settings built on pydantic-settings.
"""

from .base_config import (
    BaseConfig,
    Environment,
    LogLevel,
    ExperienceMatchPolicy,
    FilterCombinationPolicy,
)
from .config_validator import ConfigFactory, ConfigValidator, ConfigurationError, get_config

__all__ = [
    "BaseConfig",
    "Environment",
    "LogLevel",
    "ExperienceMatchPolicy",
    "FilterCombinationPolicy",
    "ConfigFactory",
    "ConfigValidator",
    "ConfigurationError",
    "get_config",
]
