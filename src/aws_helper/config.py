"""Construction-time configuration for AwsHelper."""

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .envelope import default_completion_callback
from .errors import ConfigurationError
from .logging_setup import resolve_level

Validator = Callable[[Dict[str, Any]], Any]
CompletionCallback = Callable[[Any, Any], Any]

LOG_TYPES = ("None", "Tail")
INVOCATION_TYPES = ("RequestResponse", "Event", "DryRun")

# Setup keys accepted under their legacy camel-case spelling.
SETUP_ALIASES = {
    "apiVersion": "api_version",
    "lambda_apiVersion": "lambda_api_version",
}

_STRING_OPTIONS = (
    "table_name",
    "region",
    "api_version",
    "credentials_profile",
    "lambda_credentials_profile",
    "lambda_api_version",
    "lambda_region",
    "lambda_log_type",
    "lambda_invocation_type",
)
_CALLABLE_OPTIONS = (
    "write_data_validation",
    "get_data_validation",
    "delete_data_validation",
    "completion_callback",
)


@dataclass(frozen=True)
class HelperConfig:
    """Targets, credentials and hooks of one AwsHelper instance."""

    table_name: str = "user_middle_cache"
    region: str = "us-east-2"
    api_version: Optional[str] = None
    log_level: Union[str, int] = "DEBUG"
    credentials_profile: Optional[str] = "archive"
    write_data_validation: Optional[Validator] = None
    get_data_validation: Optional[Validator] = None
    delete_data_validation: Optional[Validator] = None
    lambda_credentials_profile: Optional[str] = None
    lambda_api_version: Optional[str] = None
    lambda_region: str = "us-east-1"
    lambda_log_type: str = "Tail"
    lambda_invocation_type: str = "RequestResponse"
    completion_callback: CompletionCallback = default_completion_callback

    def __post_init__(self) -> None:
        """Type-check every option.

        Raises:
            ConfigurationError: If an option has the wrong type or value
            ValueError: If log_level is not a recognized level
        """
        for name in _STRING_OPTIONS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(
                    f"Invalid {name}: expected string, got {type(value).__name__}"
                )
        for name in _CALLABLE_OPTIONS:
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ConfigurationError(f"Invalid {name}: expected a callable")

        for name in ("table_name", "region", "lambda_region"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} cannot be empty")
        if self.lambda_log_type not in LOG_TYPES:
            raise ConfigurationError(
                f"Invalid lambda_log_type '{self.lambda_log_type}', expected one of {LOG_TYPES}"
            )
        if self.lambda_invocation_type not in INVOCATION_TYPES:
            raise ConfigurationError(
                f"Invalid lambda_invocation_type '{self.lambda_invocation_type}', "
                f"expected one of {INVOCATION_TYPES}"
            )

        resolve_level(self.log_level)

    @property
    def effective_lambda_profile(self) -> Optional[str]:
        """Profile used for the Lambda client, falling back to the table profile."""
        return self.lambda_credentials_profile or self.credentials_profile

    @classmethod
    def from_setup(cls, setup: Optional[Mapping[str, Any]] = None) -> "HelperConfig":
        """Merge a setup mapping over the defaults.

        Args:
            setup: Caller-supplied options; falsy values (None, empty strings, 0)
                count as not provided and take the default

        Returns:
            The validated configuration.

        Raises:
            ConfigurationError: If setup is not a mapping or has unknown keys
        """
        if setup is None:
            return cls()
        if not isinstance(setup, Mapping):
            raise ConfigurationError(
                f"Invalid setup: expected a mapping, got {type(setup).__name__}"
            )

        known = {f.name for f in fields(cls)}
        options: Dict[str, Any] = {}
        unknown = []
        for key, value in setup.items():
            name = SETUP_ALIASES.get(key, key)
            if name not in known:
                unknown.append(key)
            elif value:
                options[name] = value

        if unknown:
            raise ConfigurationError(f"Unknown setup keys: {', '.join(sorted(unknown))}")
        return cls(**options)
