"""
Production environment configuration.
Optimized for performance, security, and reliability in production deployment.
"""

from typing import List, Optional
from ..base_config import BaseConfig, Environment, LogLevel


class ProductionConfig(BaseConfig):
    """
    Production environment configuration.

    Features:
    - JSON logs written to a rotating file
    - Restricted CORS origins
    - API documentation disabled
    """

    ENVIRONMENT: Environment = Environment.PRODUCTION
    DEBUG: bool = False

    LOG_LEVEL: LogLevel = LogLevel.INFO
    LOG_FILE: Optional[str] = "/var/log/jobboard/app.log"
    LOG_JSON: bool = True

    CORS_ORIGINS: List[str] = []

    DOCS_URL: Optional[str] = None
    REDOC_URL: Optional[str] = None
    OPENAPI_URL: Optional[str] = None

    MONGO_MAX_POOL_SIZE: int = 50
    MONGO_MIN_POOL_SIZE: int = 5
