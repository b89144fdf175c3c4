"""Uniform {data, status, message} responses for every helper operation.

Success payloads and error values of any shape (botocore exceptions,
validator results, plain mappings or strings) are normalized into the same
envelope so callers only ever inspect ``status`` and ``message``.
"""

import json
import logging
from http import HTTPStatus
from typing import Any, Dict, Mapping, Optional, Tuple

from botocore.exceptions import ClientError, ParamValidationError

logger = logging.getLogger("aws_helper.helpers")

BAD_REQUEST_CODES = frozenset(
    {
        "MissingRequiredParameter",
        "MultipleValidationErrors",
        "ValidationException",
        "ParamValidationError",
    }
)


def status_phrase(status_code: int) -> str:
    """Return the standard reason phrase for a status code, or an empty string."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def create_response(data: Any, status_code: int, message: str = "") -> Dict[str, Any]:
    """Build a response envelope.

    Args:
        data: Payload passed through unchanged
        status_code: HTTP-like status of the operation
        message: Optional detail appended to the standard phrase

    Returns:
        Dict with data, status and message keys.
    """
    phrase = status_phrase(status_code)
    detail = (message or "").strip()
    if phrase and detail:
        text = f"{phrase}. {detail}"
    else:
        text = phrase or detail or str(status_code)
    response = {"data": data, "status": status_code, "message": text.strip()}
    logger.debug(f"Response created : {response}")
    return response


def _code_and_message(err: Any) -> Tuple[Optional[str], Optional[str]]:
    if isinstance(err, ClientError):
        error = err.response.get("Error", {})
        return error.get("Code"), error.get("Message")
    if isinstance(err, ParamValidationError):
        return "ParamValidationError", str(err)
    if isinstance(err, Mapping):
        return err.get("code"), err.get("message")
    return getattr(err, "code", None), getattr(err, "message", None)


def get_error_status(err: Any) -> int:
    """Derive the status code for an error.

    An explicit status carried by the error wins, then known bad-request
    codes map to 400, and everything else is a 500.
    """
    status = None
    if isinstance(err, ClientError):
        status = err.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    elif isinstance(err, Mapping):
        for key in ("status", "statusCode", "status_code"):
            if err.get(key) is not None:
                status = err[key]
                break
    else:
        status = getattr(err, "status_code", None) or getattr(err, "statusCode", None)

    if isinstance(status, int) and not isinstance(status, bool):
        return status

    code, _ = _code_and_message(err)
    if code in BAD_REQUEST_CODES:
        return 400
    return 500


def get_error_message(err: Any) -> str:
    """Render an error as text.

    Args:
        err: Exception, mapping or string describing the failure

    Returns:
        "<code> : <message>", the code alone, or a textual form of err.
    """
    code, message = _code_and_message(err)
    if code:
        if message:
            return f"{code} : {message}"
        return f"{code}"
    if isinstance(err, str):
        return err
    if isinstance(err, BaseException):
        return str(err) or type(err).__name__
    return json.dumps(err, default=str)


def get_error_response(err: Any) -> Dict[str, Any]:
    """Build the error envelope for err."""
    return create_response(None, get_error_status(err), get_error_message(err))


def default_completion_callback(err: Any, data: Any) -> Dict[str, Any]:
    """Default completion handler: settle an operation into an envelope.

    Args:
        err: The failure, or None on success
        data: The payload on success

    Returns:
        The response envelope.
    """
    if err is not None:
        response = get_error_response(err)
        logger.error(f"There was an error : {response['message']}")
        return response
    logger.info("Executed successfully.")
    return create_response(data, 200)
