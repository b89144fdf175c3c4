"""Stock validators for AwsHelper hooks.

Keys declared in the table schema must accompany every operation, and
DynamoDB will happily store incomplete items otherwise. These factories
build validators that can be registered as write_data_validation,
get_data_validation or delete_data_validation.
"""

import inspect
from typing import Any, Awaitable, Callable, Dict, Iterable, List

from dateutil import parser

from .hooks import ValidationResult, to_validation_result

Validator = Callable[[Dict[str, Any]], ValidationResult]

GET_REQUIRED_ATTRIBUTES = ("user_id", "device_id")
DELETE_REQUIRED_ATTRIBUTES = ("user_id", "device_id")
WRITE_REQUIRED_ATTRIBUTES = (
    "user_id",
    "device_id",
    "jwt",
    "permission",
    "last_visited",
    "request_log",
    "user_type",
    "expiry_interval",
    "login_time",
)

OK = ValidationResult(status=200)


def required_attributes_validator(required: Iterable[str]) -> Validator:
    """Build a validator rejecting attribute maps that lack any of required.

    Args:
        required: Attribute names that must be present

    Returns:
        A validator returning 400 with the missing names, or 200.
    """
    names = tuple(required)

    def validate(data: Dict[str, Any]) -> ValidationResult:
        if not isinstance(data, dict):
            return ValidationResult(
                400, f"Data must be an attribute map, got {type(data).__name__}"
            )
        missing = [name for name in names if name not in data]
        if missing:
            return ValidationResult(400, f"Missing required attributes: {', '.join(missing)}")
        return OK

    return validate


def _scalar(value: Any) -> Any:
    # Typed attribute values look like {"S": "..."} or {"N": "..."}.
    if isinstance(value, dict):
        for tag in ("S", "N"):
            if tag in value:
                return value[tag]
    return value


def timestamp_attributes_validator(names: Iterable[str]) -> Validator:
    """Build a validator checking that the named attributes hold timestamps.

    String values must parse as dates (ISO 8601 and the other formats
    dateutil understands); numeric values are taken as epoch seconds.
    Attributes that are absent are not checked.
    """
    names = tuple(names)

    def validate(data: Dict[str, Any]) -> ValidationResult:
        if not isinstance(data, dict):
            return ValidationResult(
                400, f"Data must be an attribute map, got {type(data).__name__}"
            )
        invalid: List[str] = []
        for name in names:
            if name not in data:
                continue
            value = data[name]
            raw = _scalar(value)
            if isinstance(value, dict) and "N" in value:
                try:
                    float(raw)
                except (TypeError, ValueError):
                    invalid.append(name)
                continue
            try:
                parser.parse(raw)
            except (TypeError, ValueError, OverflowError):
                invalid.append(name)
        if invalid:
            return ValidationResult(400, f"Invalid timestamp attributes: {', '.join(invalid)}")
        return OK

    return validate


def chain_validators(
    *validators: Callable[[Dict[str, Any]], Any]
) -> Callable[[Dict[str, Any]], Awaitable[ValidationResult]]:
    """Run validators in order, stopping at the first failure.

    Validators may be sync or async; the chained validator is a coroutine
    function and can be registered like any other async validator.
    """

    async def validate(data: Dict[str, Any]) -> ValidationResult:
        for validator in validators:
            outcome = validator(data)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            result = to_validation_result(outcome)
            if not result.ok:
                return result
        return OK

    return validate
