"""
Development environment configuration.
Verbose logging and permissive CORS for local work.
"""

from typing import List
from ..base_config import BaseConfig, Environment, LogLevel


class DevelopmentConfig(BaseConfig):
    """Development environment configuration."""

    ENVIRONMENT: Environment = Environment.DEVELOPMENT
    DEBUG: bool = True

    LOG_LEVEL: LogLevel = LogLevel.DEBUG
    LOG_JSON: bool = False

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8080",
    ]
