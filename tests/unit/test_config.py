import pytest

from jobboard.config import (
    ConfigFactory,
    ConfigValidator,
    ConfigurationError,
    Environment,
    ExperienceMatchPolicy,
    FilterCombinationPolicy,
)


def test_testing_environment_defaults():
    config = ConfigFactory.create_config(Environment.TESTING)

    assert config.ENVIRONMENT is Environment.TESTING
    assert config.MONGO_DB_NAME == "jobboard_test"
    assert config.EXPERIENCE_MATCH_POLICY is ExperienceMatchPolicy.EXACT
    assert config.FILTER_COMBINATION_POLICY is FilterCombinationPolicy.INTERSECT
    assert config.MAX_PAGE_LIMIT == 50


def test_policies_read_from_environment(monkeypatch):
    monkeypatch.setenv("EXPERIENCE_MATCH_POLICY", "meets_or_exceeds")
    monkeypatch.setenv("FILTER_COMBINATION_POLICY", "overwrite")

    config = ConfigFactory.create_config(Environment.TESTING)

    assert config.EXPERIENCE_MATCH_POLICY is ExperienceMatchPolicy.MEETS_OR_EXCEEDS
    assert config.FILTER_COMBINATION_POLICY is FilterCombinationPolicy.OVERWRITE


def test_unknown_environment_falls_back_to_development(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "staging")

    with pytest.warns(UserWarning):
        assert ConfigFactory.get_environment() is Environment.DEVELOPMENT


def test_invalid_settings_warn_outside_production(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "postgres://db")
    monkeypatch.setenv("DEFAULT_PAGE_LIMIT", "80")

    with pytest.warns(UserWarning, match="Invalid configuration"):
        config = ConfigFactory.create_config(Environment.TESTING)

    results = ConfigValidator.validate_config(config)
    assert results["database_errors"] == ["Invalid MONGO_URI scheme: postgres://db"]
    assert results["business_rule_errors"] == [
        "DEFAULT_PAGE_LIMIT must be between 1 and MAX_PAGE_LIMIT"
    ]


def test_invalid_production_config_raises(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "not-a-uri")

    with pytest.raises(ConfigurationError):
        ConfigFactory.create_config(Environment.PRODUCTION)


def test_database_config_kwargs():
    config = ConfigFactory.create_config(Environment.TESTING)
    kwargs = config.get_database_config()

    assert kwargs["serverSelectionTimeoutMS"] == 1000
    assert kwargs["retryReads"] is True


def test_page_limit_above_hard_cap_is_rejected(monkeypatch):
    monkeypatch.setenv("MAX_PAGE_LIMIT", "200")

    with pytest.warns(UserWarning, match="MAX_PAGE_LIMIT must be between 1 and 50"):
        config = ConfigFactory.create_config(Environment.TESTING)

    assert ConfigValidator.validate_business_rules(config) == [
        "MAX_PAGE_LIMIT must be between 1 and 50"
    ]


def test_page_limit_above_hard_cap_raises_in_production(monkeypatch):
    monkeypatch.setenv("MAX_PAGE_LIMIT", "200")

    with pytest.raises(ConfigurationError, match="MAX_PAGE_LIMIT"):
        ConfigFactory.create_config(Environment.PRODUCTION)
