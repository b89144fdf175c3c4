"""boto3 session and client construction, one session per helper."""

import logging
from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ProfileNotFound

logger = logging.getLogger("aws_helper.helpers")


def botocore_config() -> Config:
    # Retries and timeouts are left to botocore; adaptive mode backs off on throttling.
    return Config(retries={"max_attempts": 10, "mode": "adaptive"})


def build_session(region: str, profile: Optional[str] = None) -> boto3.session.Session:
    """Create a boto3 session for a region and credentials profile.

    A profile that cannot be found is not fatal: the session then relies on
    environment or execution-role credentials.

    Args:
        region: AWS region name
        profile: Shared credentials profile, or None for the default chain

    Returns:
        A boto3 session.
    """
    if profile:
        try:
            session = boto3.session.Session(profile_name=profile, region_name=region)
            logger.info(f"Successfully set credentials from profile '{profile}'")
            return session
        except ProfileNotFound as e:
            logger.warning(f"Error while getting credentials ({e!s}). Going forward without them.")
    return boto3.session.Session(region_name=region)


def _client(session: boto3.session.Session, service: str, api_version: Optional[str]) -> Any:
    kwargs = {"config": botocore_config()}
    if api_version:
        kwargs["api_version"] = api_version
    return session.client(service, **kwargs)


def dynamodb_client(session: boto3.session.Session, api_version: Optional[str] = None) -> Any:
    """Return a low-level DynamoDB client bound to session."""
    return _client(session, "dynamodb", api_version)


def lambda_client(session: boto3.session.Session, api_version: Optional[str] = None) -> Any:
    """Return a Lambda client bound to session."""
    return _client(session, "lambda", api_version)
