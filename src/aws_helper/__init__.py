"""Helpers for DynamoDB table operations and Lambda invocation.

This package wraps boto3 put/get/delete item and Lambda invoke calls behind
a uniform {data, status, message} response, with optional validation hooks
run before each table operation.
"""

__version__ = "0.1.0"

from .config import HelperConfig
from .envelope import (
    create_response,
    default_completion_callback,
    get_error_message,
    get_error_response,
    get_error_status,
)
from .errors import AwsHelperError, ConfigurationError, ValidationError
from .helper import AwsHelper, AwsHelperProtocol
from .hooks import ValidationResult, run_validation
from .validators import (
    chain_validators,
    required_attributes_validator,
    timestamp_attributes_validator,
)

__all__ = [
    "AwsHelper",
    "AwsHelperError",
    "AwsHelperProtocol",
    "ConfigurationError",
    "HelperConfig",
    "ValidationError",
    "ValidationResult",
    "chain_validators",
    "create_response",
    "default_completion_callback",
    "get_error_message",
    "get_error_response",
    "get_error_status",
    "required_attributes_validator",
    "run_validation",
    "timestamp_attributes_validator",
]
