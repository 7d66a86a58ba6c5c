"""
Response outcome classification.

The site marks success differently per endpoint: a nested JSON status
string, a nested JSON status integer, the presence of a JSON key, a JSON
boolean, or only the HTTP status code. Each OutcomeShape has its own rule.
Classification never raises on malformed bodies and never consumes them.
"""

from typing import Any, Callable, Dict

from chomikuj.core.exceptions import RequestFailedError
from chomikuj.core.interfaces import OutcomeShape, Response

_MISSING = object()


def _load_json(response: Response) -> Any:
    try:
        return response.json()
    except (ValueError, UnicodeDecodeError, RecursionError):
        return _MISSING


def _lookup(document: Any, *keys: str) -> Any:
    """Follow object keys; null counts as absent."""
    current = document
    for key in keys:
        if not isinstance(current, dict) or current.get(key) is None:
            return _MISSING
        current = current[key]
    return current


def _is_exact_int(value: Any, expected: int) -> bool:
    # bool is an int subclass; false must not pass for 0
    return type(value) is int and value == expected


def _data_status_ok(response: Response) -> bool:
    status = _lookup(_load_json(response), "Data", "Status")
    return isinstance(status, str) and status == "OK"


def _data_status_zero(response: Response) -> bool:
    status = _lookup(_load_json(response), "Data", "Status")
    return _is_exact_int(status, 0)


def _has_url(response: Response) -> bool:
    return _lookup(_load_json(response), "Url") is not _MISSING


def _is_success_true(response: Response) -> bool:
    return _lookup(_load_json(response), "IsSuccess") is True


def _status_200(response: Response) -> bool:
    return response.status_code == 200


def _status_400(response: Response) -> bool:
    return response.status_code == 400


_RULES: Dict[OutcomeShape, Callable[[Response], bool]] = {
    OutcomeShape.JSON_DATA_STATUS_OK: _data_status_ok,
    OutcomeShape.JSON_DATA_STATUS_ZERO: _data_status_zero,
    OutcomeShape.JSON_URL: _has_url,
    OutcomeShape.JSON_ISSUCCESS_ONE: _is_success_true,
    OutcomeShape.STATUS_200: _status_200,
    OutcomeShape.STATUS_400: _status_400,
}


def classify(response: Response, shape: OutcomeShape) -> bool:
    """
    Decide whether a response means success for an operation of the given shape.

    Args:
        response: Response to inspect. Its body stays readable afterwards.
        shape: Success rule of the operation that produced the response.

    Returns:
        True if the response matches the rule.
    """
    return _RULES[shape](response)


def ensure_success(response: Response, shape: OutcomeShape) -> Response:
    """Return the response if it classifies as success, else raise RequestFailedError."""
    if not classify(response, shape):
        raise RequestFailedError()
    return response
