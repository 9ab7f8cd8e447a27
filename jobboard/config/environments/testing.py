"""
Testing environment configuration.
Optimized for automated testing with fast execution and isolation.
"""

from typing import List, Optional
from ..base_config import BaseConfig, Environment, LogLevel


class TestingConfig(BaseConfig):
    """
    Testing environment configuration.

    Features:
    - Isolated database name
    - Minimal logging to reduce noise
    - No log file on disk
    """

    ENVIRONMENT: Environment = Environment.TESTING
    DEBUG: bool = False

    LOG_LEVEL: LogLevel = LogLevel.WARNING
    LOG_FILE: Optional[str] = None
    LOG_JSON: bool = False

    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False

    SECRET_KEY: str = "test-secret-key-not-for-production-use-only"

    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "jobboard_test"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 1000
