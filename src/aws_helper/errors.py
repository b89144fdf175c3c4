"""Exceptions raised by the aws_helper package."""


class AwsHelperError(Exception):
    """Base exception for aws_helper errors."""


class ConfigurationError(AwsHelperError):
    """Raised when a helper is constructed with an invalid setup."""


class ValidationError(AwsHelperError):
    """Exception raised by validators to reject a pending operation."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Initialize ValidationError.

        Args:
            message: Error description
            status_code: HTTP status code
        """
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)
