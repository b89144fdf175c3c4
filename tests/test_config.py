"""Tests for HelperConfig."""

from dataclasses import FrozenInstanceError

import pytest

from src.aws_helper.config import HelperConfig
from src.aws_helper.envelope import default_completion_callback
from src.aws_helper.errors import ConfigurationError


class TestDefaults:
    """Tests for default values."""

    def test_defaults(self) -> None:
        """Test an empty setup yields the stock configuration."""
        config = HelperConfig.from_setup({})

        assert config == HelperConfig()
        assert config.table_name == "user_middle_cache"
        assert config.region == "us-east-2"
        assert config.credentials_profile == "archive"
        assert config.lambda_region == "us-east-1"
        assert config.lambda_log_type == "Tail"
        assert config.lambda_invocation_type == "RequestResponse"
        assert config.completion_callback is default_completion_callback
        assert HelperConfig.from_setup(None) == config

    def test_none_falls_back_to_default(self) -> None:
        """Test None values count as not provided."""
        config = HelperConfig.from_setup({"table_name": "sessions", "region": None})
        assert config.table_name == "sessions"
        assert config.region == "us-east-2"

    def test_camel_case_aliases(self) -> None:
        """Test the camel-case apiVersion spellings are accepted."""
        config = HelperConfig.from_setup(
            {"apiVersion": "2012-08-10", "lambda_apiVersion": "2015-03-31"}
        )
        assert config.api_version == "2012-08-10"
        assert config.lambda_api_version == "2015-03-31"

    def test_lambda_profile_fallback(self) -> None:
        """Test the Lambda profile defaults to the table profile."""
        assert HelperConfig(credentials_profile="p1").effective_lambda_profile == "p1"
        config = HelperConfig(credentials_profile="p1", lambda_credentials_profile="p2")
        assert config.effective_lambda_profile == "p2"

    def test_frozen(self) -> None:
        """Test the configuration cannot change after construction."""
        config = HelperConfig()
        with pytest.raises(FrozenInstanceError):
            config.table_name = "other"  # type: ignore


class TestValidation:
    """Tests for rejected setups."""

    def test_unknown_keys(self) -> None:
        """Test unknown keys are rejected."""
        with pytest.raises(ConfigurationError, match="tabel_name"):
            HelperConfig.from_setup({"tabel_name": "sessions"})

    def test_setup_must_be_mapping(self) -> None:
        """Test non-mapping setups are rejected."""
        with pytest.raises(ConfigurationError):
            HelperConfig.from_setup(["table_name"])  # type: ignore

    @pytest.mark.parametrize(
        "setup",
        [
            {"table_name": 42},
            {"region": ["us-east-1"]},
            {"write_data_validation": "not callable"},
            {"completion_callback": 1},
            {"lambda_log_type": "Verbose"},
            {"lambda_invocation_type": "Async"},
        ],
    )
    def test_bad_values(self, setup: dict) -> None:
        """Test badly typed or unsupported values are rejected."""
        with pytest.raises(ConfigurationError):
            HelperConfig.from_setup(setup)

    def test_falsy_values_take_defaults(self) -> None:
        """Test empty strings and zero fall back like missing options."""
        config = HelperConfig.from_setup(
            {"table_name": "", "region": "", "credentials_profile": "", "log_level": 0}
        )

        assert config.table_name == "user_middle_cache"
        assert config.region == "us-east-2"
        assert config.credentials_profile == "archive"
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("name", ["table_name", "region", "lambda_region"])
    def test_empty_targets_rejected(self, name: str) -> None:
        """Test a directly built config cannot target an empty table or region."""
        with pytest.raises(ConfigurationError, match=name):
            HelperConfig(**{name: ""})

    def test_bad_log_level(self) -> None:
        """Test an unknown log level raises ValueError."""
        with pytest.raises(ValueError):
            HelperConfig.from_setup({"log_level": "loud"})
        assert HelperConfig.from_setup({"log_level": 15}).log_level == 15
