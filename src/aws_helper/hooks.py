"""Pre-operation validation hooks."""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from .errors import ValidationError

logger = logging.getLogger("aws_helper.helpers")

OPERATIONS = ("write", "get", "delete")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validator: 200 approves the pending operation."""

    status: int
    message: str = ""

    @property
    def ok(self) -> bool:
        """Whether the pending operation may proceed."""
        return self.status == 200


def to_validation_result(value: Any) -> ValidationResult:
    """Normalize whatever a validator returned.

    Raises:
        TypeError: If value is neither a ValidationResult nor a mapping with a status
    """
    if isinstance(value, ValidationResult):
        return value
    if isinstance(value, Mapping) and "status" in value:
        return ValidationResult(status=value["status"], message=str(value.get("message") or ""))
    raise TypeError(
        f"Validators must return a ValidationResult or a mapping with 'status', "
        f"got {type(value).__name__}"
    )


async def run_validation(
    operation: str,
    validator: Optional[Callable[[Dict[str, Any]], Any]],
    data: Dict[str, Any],
) -> Optional[ValidationResult]:
    """Run the validator registered for an operation.

    Args:
        operation: One of write, get, delete
        validator: Sync or async callable, or None when nothing is registered
        data: The attribute map about to be sent

    Returns:
        None if there is no validator, otherwise the validation result.
    """
    if validator is None:
        return None

    logger.info(f"Running {operation} data validation.")
    try:
        outcome = validator(data)
        if inspect.isawaitable(outcome):
            outcome = await outcome
    except ValidationError as e:
        outcome = ValidationResult(status=e.status_code, message=e.message)

    result = to_validation_result(outcome)
    if not result.ok:
        logger.error(
            f"Validation failed for {operation}. status: {result.status}, "
            f"message: {result.message}"
        )
    return result
