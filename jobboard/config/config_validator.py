"""
Configuration validation and factory module.
Ensures configuration integrity and provides environment-specific config instances.
"""

import os
import warnings
from typing import Type, Dict, List, Optional
from functools import lru_cache

from jobboard.core.constants import BusinessRules

from .base_config import BaseConfig, Environment
from .environments.development import DevelopmentConfig
from .environments.production import ProductionConfig
from .environments.testing import TestingConfig


class ConfigurationError(Exception):
    """Configuration-related error."""
    pass


class ConfigValidator:
    """Configuration validation utility."""

    @staticmethod
    def validate_database_settings(config: BaseConfig) -> List[str]:
        """
        Validate MongoDB connection settings.
        Returns list of validation errors.
        """
        errors = []

        if not config.MONGO_URI.startswith(("mongodb://", "mongodb+srv://")):
            errors.append(f"Invalid MONGO_URI scheme: {config.MONGO_URI}")

        if not config.MONGO_DB_NAME:
            errors.append("MONGO_DB_NAME must not be empty")

        if config.MONGO_MIN_POOL_SIZE > config.MONGO_MAX_POOL_SIZE:
            errors.append("MONGO_MIN_POOL_SIZE cannot exceed MONGO_MAX_POOL_SIZE")

        return errors

    @staticmethod
    def validate_network_settings(config: BaseConfig) -> List[str]:
        """
        Validate network-related settings.
        Returns list of validation errors.
        """
        errors = []

        if not (1 <= config.PORT <= 65535):
            errors.append(f"Invalid port number: {config.PORT}")

        if not config.AUTH_SERVICE_URL.startswith(("http://", "https://")):
            errors.append(
                f"Invalid URL format for AUTH_SERVICE_URL: {config.AUTH_SERVICE_URL}"
            )

        return errors

    @staticmethod
    def validate_business_rules(config: BaseConfig) -> List[str]:
        """
        Validate pagination and ranking settings.
        Returns list of validation errors.
        """
        errors = []

        if not (1 <= config.MAX_PAGE_LIMIT <= BusinessRules.MAX_PAGE_LIMIT):
            errors.append(
                f"MAX_PAGE_LIMIT must be between 1 and {BusinessRules.MAX_PAGE_LIMIT}"
            )

        if not (1 <= config.DEFAULT_PAGE_LIMIT <= config.MAX_PAGE_LIMIT):
            errors.append("DEFAULT_PAGE_LIMIT must be between 1 and MAX_PAGE_LIMIT")

        if not (1 <= config.DEFAULT_SUGGESTION_LIMIT <= config.MAX_PAGE_LIMIT):
            errors.append(
                "DEFAULT_SUGGESTION_LIMIT must be between 1 and MAX_PAGE_LIMIT"
            )

        if config.DEFAULT_COMPANY_PAGE_LIMIT < 1:
            errors.append("DEFAULT_COMPANY_PAGE_LIMIT must be positive")

        return errors

    @staticmethod
    def validate_security_settings(config: BaseConfig) -> List[str]:
        """
        Validate security-related settings.
        Returns list of validation warnings.
        """
        warnings_found = []

        if config.ENVIRONMENT == Environment.PRODUCTION:
            if config.DEBUG:
                warnings_found.append("DEBUG should be disabled in production")

            if config.DOCS_URL or config.REDOC_URL:
                warnings_found.append("API documentation should be disabled in production")

            if "*" in config.CORS_ORIGINS:
                warnings_found.append("Wildcard CORS origin should not be used in production")

        if len(config.SECRET_KEY) < 32:
            warnings_found.append("SECRET_KEY should be at least 32 characters long")

        return warnings_found

    @classmethod
    def validate_config(cls, config: BaseConfig) -> Dict[str, List[str]]:
        """
        Perform comprehensive configuration validation.
        Returns dictionary with validation results.
        """
        return {
            "database_errors": cls.validate_database_settings(config),
            "network_errors": cls.validate_network_settings(config),
            "business_rule_errors": cls.validate_business_rules(config),
            "security_warnings": cls.validate_security_settings(config),
        }


class ConfigFactory:
    """Factory for creating environment-specific configurations."""

    _config_map: Dict[Environment, Type[BaseConfig]] = {
        Environment.DEVELOPMENT: DevelopmentConfig,
        Environment.PRODUCTION: ProductionConfig,
        Environment.TESTING: TestingConfig,
    }

    @classmethod
    def get_environment(cls) -> Environment:
        """
        Determine the current environment from environment variable.
        Defaults to development if not specified.
        """
        env_name = os.getenv("ENVIRONMENT", "development").lower()

        try:
            return Environment(env_name)
        except ValueError:
            warnings.warn(
                f"Unknown environment '{env_name}', defaulting to development"
            )
            return Environment.DEVELOPMENT

    @classmethod
    def create_config(cls, environment: Optional[Environment] = None) -> BaseConfig:
        """
        Create configuration instance for the specified environment.
        If no environment is specified, detects from environment variable.
        """
        if environment is None:
            environment = cls.get_environment()

        config_class = cls._config_map.get(environment)
        if not config_class:
            raise ConfigurationError(f"No configuration found for environment: {environment}")

        try:
            config = config_class()
        except Exception as e:
            raise ConfigurationError(
                f"Failed to create {environment.value} configuration: {e}"
            ) from e

        results = ConfigValidator.validate_config(config)

        errors = (
            results["database_errors"]
            + results["network_errors"]
            + results["business_rule_errors"]
        )
        if errors:
            error_msg = f"Invalid configuration: {'; '.join(errors)}"
            if environment == Environment.PRODUCTION:
                raise ConfigurationError(error_msg)
            warnings.warn(error_msg)

        for warning in results["security_warnings"]:
            if environment == Environment.PRODUCTION:
                warnings.warn(f"Security warning: {warning}")

        return config


@lru_cache()
def get_config() -> BaseConfig:
    """Get the cached configuration for the current environment."""
    return ConfigFactory.create_config()
