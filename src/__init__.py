"""AWS helper package.

This package provides DynamoDB table operations and Lambda invocation
behind a uniform response envelope.
"""

__version__ = "0.1.0"

from src.aws_helper import AwsHelper, ValidationError

__all__ = ["AwsHelper", "ValidationError"]
