"""Shared fixtures for aws_helper tests."""

from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

from src.aws_helper import AwsHelper


@pytest.fixture
def db_con() -> MagicMock:
    """Mock low-level DynamoDB client."""
    client = MagicMock()
    client.put_item.return_value = {"ResponseMetadata": {"HTTPStatusCode": 200}}
    client.get_item.return_value = {}
    client.delete_item.return_value = {"ResponseMetadata": {"HTTPStatusCode": 200}}
    return client


@pytest.fixture
def lambda_con() -> MagicMock:
    """Mock Lambda client."""
    return MagicMock()


@pytest.fixture
def make_helper(db_con: MagicMock, lambda_con: MagicMock) -> Any:
    """Factory building an AwsHelper around the mock clients."""

    def factory(**setup: Any) -> AwsHelper:
        options: Dict[str, Any] = {"table_name": "sessions", "log_level": "error"}
        options.update(setup)
        return AwsHelper(options, db_con=db_con, lambda_con=lambda_con)

    return factory


@pytest.fixture
def session_key() -> Dict[str, Any]:
    """Primary key of a session row."""
    return {"user_id": {"S": "u1"}, "device_id": {"S": "d1"}}
