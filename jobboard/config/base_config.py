"""
Base configuration class for the job board ranking service.
This provides the foundation for environment-specific configurations.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import List, Dict, Any, Optional
from enum import Enum


class Environment(str, Enum):
    """Application environment enumeration."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ExperienceMatchPolicy(str, Enum):
    """How a candidate's overall experience is compared to a job's requirement."""

    EXACT = "exact"
    MEETS_OR_EXCEEDS = "meets_or_exceeds"


class FilterCombinationPolicy(str, Enum):
    """How several OR-groups in one job filter are combined."""

    INTERSECT = "intersect"
    OVERWRITE = "overwrite"


class BaseConfig(BaseSettings):
    """
    Base configuration class containing common settings across all environments.
    Environment-specific configurations should inherit from this class.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Information
    APP_NAME: str = "Job Board Ranking API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = (
        "Candidate job ranking, search suggestions and company lookup service"
    )
    ENVIRONMENT: Environment = Environment.DEVELOPMENT

    # API Configuration
    API_V1_STR: str = "/api/v1"
    OPENAPI_URL: Optional[str] = "/api/v1/openapi.json"
    DOCS_URL: Optional[str] = "/api/v1/docs"
    REDOC_URL: Optional[str] = "/api/v1/redoc"

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # Security Configuration
    SECRET_KEY: str = "development-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    AUTH_SERVICE_URL: str = "http://localhost:5000"
    AUTH_SERVICE_TIMEOUT: float = 5.0

    # Database Configuration
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "jobboard"
    MONGO_MAX_POOL_SIZE: int = 10
    MONGO_MIN_POOL_SIZE: int = 2
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    MONGO_SOCKET_TIMEOUT_MS: int = 45000

    # Collections
    JOB_COLLECTION: str = "jobs"
    CANDIDATE_COLLECTION: str = "candidates"
    COMPANY_COLLECTION: str = "companies"
    SKILL_COLLECTION: str = "skills"

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8080"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]

    # Logging Configuration
    LOG_LEVEL: LogLevel = LogLevel.INFO
    LOG_FILE: Optional[str] = None
    LOG_MAX_SIZE: int = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT: int = 5
    LOG_JSON: bool = True

    # Ranking and Pagination
    DEFAULT_PAGE_LIMIT: int = 10
    MAX_PAGE_LIMIT: int = 50
    DEFAULT_SUGGESTION_LIMIT: int = 8
    DEFAULT_COMPANY_PAGE_LIMIT: int = 20
    EXPERIENCE_MATCH_POLICY: ExperienceMatchPolicy = ExperienceMatchPolicy.EXACT
    FILTER_COMBINATION_POLICY: FilterCombinationPolicy = FilterCombinationPolicy.INTERSECT

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    def get_database_config(self) -> Dict[str, Any]:
        """Get MongoDB client keyword arguments."""
        return {
            "maxPoolSize": self.MONGO_MAX_POOL_SIZE,
            "minPoolSize": self.MONGO_MIN_POOL_SIZE,
            "serverSelectionTimeoutMS": self.MONGO_SERVER_SELECTION_TIMEOUT_MS,
            "socketTimeoutMS": self.MONGO_SOCKET_TIMEOUT_MS,
            "retryWrites": True,
            "retryReads": True,
        }

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration dictionary."""
        return {
            "allow_origins": self.CORS_ORIGINS,
            "allow_credentials": self.CORS_ALLOW_CREDENTIALS,
            "allow_methods": self.CORS_ALLOW_METHODS,
            "allow_headers": self.CORS_ALLOW_HEADERS,
        }
