"""Unit tests for core Pydantic models."""

import pytest
from pydantic import ValidationError

from retried.core.exceptions import ConfigurationError, RetriedError
from retried.core.models import RetryConfig, RetryOptions, resolve_config
from retried.core.types import BackoffStrategy


class TestRetryConfig:
    """Test RetryConfig model."""

    def test_defaults(self):
        """Test default retry configuration."""
        config = RetryConfig()

        assert config.retries == 3
        assert config.strategy == BackoffStrategy.EXPONENTIAL
        assert config.base_timeout == 1000
        assert config.max_timeout == 300_000
        assert config.on_retry is None

    def test_frozen(self):
        """Test config is immutable."""
        config = RetryConfig()

        with pytest.raises(ValidationError):
            config.retries = 10

    def test_strategy_from_string(self):
        """Test strategy accepts its string value."""
        config = RetryConfig(strategy="fixed")

        assert config.strategy == BackoffStrategy.FIXED

    @pytest.mark.parametrize(
        "field,value",
        [
            ("retries", 0),
            ("retries", -1),
            ("base_timeout", -1),
            ("max_timeout", -5),
            ("strategy", "linear"),
        ],
    )
    def test_invalid_values(self, field, value):
        """Test out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            RetryConfig(**{field: value})


class TestRetryOptions:
    """Test RetryOptions model."""

    def test_all_fields_optional(self):
        """Test empty options."""
        options = RetryOptions()

        assert options.retries is None
        assert options.strategy is None
        assert options.base_timeout is None
        assert options.max_timeout is None
        assert options.on_retry is None

    def test_unknown_field_rejected(self):
        """Test typos in option names are caught."""
        with pytest.raises(ValidationError):
            RetryOptions(retry=5)


class TestResolveConfig:
    """Test merging options over defaults."""

    def test_none_gives_defaults(self):
        """Test no options resolves to defaults."""
        assert resolve_config(None) == RetryConfig()

    def test_partial_mapping_override(self):
        """Test omitted fields fall back to defaults."""
        config = resolve_config({"retries": 7, "strategy": "fixed"})

        assert config.retries == 7
        assert config.strategy == BackoffStrategy.FIXED
        assert config.base_timeout == 1000
        assert config.max_timeout == 300_000

    def test_options_instance_override(self):
        """Test RetryOptions instance is merged."""
        config = resolve_config(RetryOptions(base_timeout=50, max_timeout=400))

        assert config.retries == 3
        assert config.base_timeout == 50
        assert config.max_timeout == 400

    def test_explicit_none_falls_back_to_default(self):
        """Test explicit None behaves like an omitted field."""
        config = resolve_config({"retries": None, "on_retry": None})

        assert config.retries == 3
        assert config.on_retry is None

    def test_on_retry_is_kept(self):
        """Test the callback is carried into the resolved config."""

        def on_retry(error):
            pass

        config = resolve_config({"on_retry": on_retry})

        assert config.on_retry is on_retry

    def test_fresh_config_per_call(self):
        """Test each resolution builds a new object."""
        options = {"retries": 4}

        assert resolve_config(options) is not resolve_config(options)

    @pytest.mark.parametrize("options", [5, "retries=3", [("retries", 3)]])
    def test_non_mapping_options_raise_configuration_error(self, options):
        """Test options that are not a mapping are rejected."""
        with pytest.raises(ConfigurationError, match="must be RetryOptions or a mapping"):
            resolve_config(options)

    @pytest.mark.parametrize(
        "options",
        [
            {"retries": 0},
            {"retries": -3},
            {"base_timeout": -1},
            {"strategy": "linear"},
            {"on_retry": "not callable"},
            {"unknown": 1},
        ],
    )
    def test_invalid_options_raise_configuration_error(self, options):
        """Test invalid options surface as ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_config(options)

        assert isinstance(exc_info.value, RetriedError)
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert "Invalid retry options" in str(exc_info.value)
