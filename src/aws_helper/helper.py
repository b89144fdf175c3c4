"""DynamoDB read/write/delete and Lambda invocation behind one envelope.

Every operation is a single pass-through call into boto3. Operations are
coroutines: the blocking SDK call runs in a worker thread, and its outcome
is settled through the completion callback, whose return value (an
envelope, for the default callback) is what the operation resolves to.
Operation failures never raise; they come back as non-200 envelopes.
"""

import asyncio
import inspect
import json
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, runtime_checkable

from .clients import build_session, dynamodb_client, lambda_client
from .config import CompletionCallback, HelperConfig
from .errors import ValidationError
from .hooks import run_validation
from .logging_setup import get_logger


@runtime_checkable
class AwsHelperProtocol(Protocol):
    """Capability interface: table write/get/delete and function invocation."""

    async def write(
        self, data: Dict[str, Any], callback: Optional[CompletionCallback] = None
    ) -> Any:
        ...

    async def get(
        self,
        data: Dict[str, Any],
        projection_expression: Optional[str] = None,
        callback: Optional[CompletionCallback] = None,
    ) -> Any:
        ...

    async def delete(
        self, data: Dict[str, Any], callback: Optional[CompletionCallback] = None
    ) -> Any:
        ...

    async def invoke(
        self, function_name: str, payload: Any, callback: Optional[CompletionCallback] = None
    ) -> Any:
        ...


class AwsHelper:
    """Convenience wrapper around one DynamoDB table and the Lambda service.

    Attribute maps use DynamoDB's typed form, for example::

        {"user_id": {"S": "Richard Roe"}, "device_id": {"S": "Richard"}}

    Attributes:
        config: The frozen HelperConfig of this instance.
        db_con: Low-level DynamoDB client.
        lambda_con: Lambda client.
    """

    def __init__(
        self,
        setup: Optional[Mapping[str, Any]] = None,
        *,
        config: Optional[HelperConfig] = None,
        db_con: Any = None,
        lambda_con: Any = None,
    ) -> None:
        """Initialize AwsHelper.

        Args:
            setup: Option mapping merged over the defaults, see HelperConfig
            config: Ready-made configuration, used instead of setup
            db_con: Pre-built DynamoDB client; built from the config when omitted
            lambda_con: Pre-built Lambda client; built from the config when omitted

        Raises:
            ConfigurationError: If setup has unknown keys or badly typed values
            ValueError: If log_level is not a recognized level
        """
        self.config = config if config is not None else HelperConfig.from_setup(setup)
        self.logger = get_logger("helpers", self.config.log_level)
        self.index_logger = get_logger("index", self.config.log_level)

        if db_con is None:
            self.index_logger.debug("Setting up connection for db_con.")
            session = build_session(self.config.region, self.config.credentials_profile)
            db_con = dynamodb_client(session, self.config.api_version)
        self.db_con = db_con

        if lambda_con is None:
            self.index_logger.debug("Setting up lambda client.")
            session = build_session(self.config.lambda_region, self.config.effective_lambda_profile)
            lambda_con = lambda_client(session, self.config.lambda_api_version)
        self.lambda_con = lambda_con

    @property
    def table_name(self) -> str:
        """Name of the DynamoDB table this helper targets."""
        return self.config.table_name

    async def _settle(
        self, callback: Optional[CompletionCallback], err: Any, data: Any
    ) -> Any:
        handler = callback or self.config.completion_callback
        result = handler(err, data)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def _call(
        self,
        method: Callable[..., Dict[str, Any]],
        params: Dict[str, Any],
        extract: Callable[[Dict[str, Any]], Any],
        callback: Optional[CompletionCallback],
    ) -> Any:
        try:
            response = await asyncio.to_thread(method, **params)
        except Exception as e:
            return await self._settle(callback, e, None)
        return await self._settle(callback, None, extract(response))

    async def _validate(
        self,
        operation: str,
        validator: Optional[Callable[[Dict[str, Any]], Any]],
        data: Dict[str, Any],
    ) -> Optional[ValidationError]:
        """Return the rejection if the registered validator fails, else None."""
        result = await run_validation(operation, validator, data)
        if result is None or result.ok:
            return None
        return ValidationError(result.message, result.status)

    # DynamoDB

    def generate_write_item(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Build put_item parameters for a full item.

        Args:
            data: Item as a typed attribute map

        Returns:
            Dict with TableName and Item.
        """
        return {"TableName": self.table_name, "Item": data}

    def generate_get_item(
        self, data: Dict[str, Any], projection_expression: Optional[str] = None
    ) -> Dict[str, Any]:
        """Build get_item parameters for a key.

        Args:
            data: Key attributes as a typed attribute map
            projection_expression: Optional attribute list to return

        Returns:
            Dict with TableName, Key and, when given, ProjectionExpression.
        """
        get_item = {"TableName": self.table_name, "Key": data}
        if projection_expression:
            get_item["ProjectionExpression"] = projection_expression
        return get_item

    def generate_delete_item(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Build delete_item parameters for a key."""
        return {"TableName": self.table_name, "Key": data}

    async def write(
        self, data: Dict[str, Any], callback: Optional[CompletionCallback] = None
    ) -> Any:
        """Put one item into the table.

        Args:
            data: Full item as a typed attribute map
            callback: Completion callback overriding the configured one

        Returns:
            The callback's result; for the default callback an envelope with
            data None on success.
        """
        rejection = await self._validate("write", self.config.write_data_validation, data)
        if rejection is not None:
            return await self._settle(callback, rejection, None)

        write_item = self.generate_write_item(data)
        self.logger.debug(f"Writing item to db : {write_item}")
        return await self._call(self.db_con.put_item, write_item, lambda _: None, callback)

    async def get(
        self,
        data: Dict[str, Any],
        projection_expression: Optional[str] = None,
        callback: Optional[CompletionCallback] = None,
    ) -> Any:
        """Read one item by key.

        Args:
            data: Key attributes as a typed attribute map
            projection_expression: Optional attribute list to return
            callback: Completion callback overriding the configured one

        Returns:
            The callback's result; for the default callback an envelope whose
            data is the item, or None when no item has that key.
        """
        rejection = await self._validate("get", self.config.get_data_validation, data)
        if rejection is not None:
            return await self._settle(callback, rejection, None)

        get_item = self.generate_get_item(data, projection_expression)
        self.logger.debug(f"Getting item from db : {get_item}")
        return await self._call(
            self.db_con.get_item, get_item, lambda response: response.get("Item"), callback
        )

    async def delete(
        self, data: Dict[str, Any], callback: Optional[CompletionCallback] = None
    ) -> Any:
        """Delete one item by key.

        Args:
            data: Key attributes as a typed attribute map
            callback: Completion callback overriding the configured one

        Returns:
            The callback's result; for the default callback an envelope with
            data None on success.
        """
        rejection = await self._validate("delete", self.config.delete_data_validation, data)
        if rejection is not None:
            return await self._settle(callback, rejection, None)

        delete_item = self.generate_delete_item(data)
        self.logger.debug(f"Deleting item from db : {delete_item}")
        return await self._call(self.db_con.delete_item, delete_item, lambda _: None, callback)

    # Lambda

    def generate_lambda_param(self, function_name: str, payload: Any) -> Dict[str, Any]:
        """Build invoke parameters with the payload serialized as JSON.

        Args:
            function_name: Name or ARN of the function to invoke
            payload: JSON-serializable event for the function

        Returns:
            Dict with FunctionName, InvocationType, LogType and Payload.

        Raises:
            TypeError: If payload cannot be serialized
        """
        return {
            "FunctionName": function_name,
            "InvocationType": self.config.lambda_invocation_type,
            "LogType": self.config.lambda_log_type,
            "Payload": json.dumps(payload),
        }

    async def invoke(
        self, function_name: str, payload: Any, callback: Optional[CompletionCallback] = None
    ) -> Any:
        """Invoke a Lambda function with a JSON payload.

        The payload becomes the invoked function's event. The raw invoke
        response, including any FunctionError marker, is passed through as data.
        """
        try:
            lambda_param = self.generate_lambda_param(function_name, payload)
        except (TypeError, ValueError) as e:
            self.logger.error(f"Could not serialize payload for {function_name}: {e!s}")
            return await self._settle(callback, e, None)
        self.logger.debug(f"Invoking lambda with params : {lambda_param}")
        return await self._call(
            self.lambda_con.invoke, lambda_param, lambda response: response, callback
        )

    # Legacy operation names
    write_data = write
    get_data = get
    delete_data = delete
    execute_lambda = invoke

