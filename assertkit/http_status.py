"""Classification of HTTP status codes."""

from __future__ import annotations

from decimal import Decimal

from assertkit.numeric import to_number

__all__ = [
    "is_http_client_error",
    "is_http_redirect",
    "is_http_server_error",
    "is_http_success",
]

_SUCCESS = frozenset({200, 201, 202, 203, 204, 205, 206, 207, 208, 226})

_REDIRECT = frozenset({300, 301, 302, 303, 304, 305, 307, 308})

_CLIENT_ERROR = frozenset(
    {
        400, 401, 402, 403, 404, 405, 406, 407, 408, 409,
        410, 411, 412, 413, 414, 415, 416, 417, 418, 421,
        422, 423, 424, 425, 426, 428, 429, 431, 451,
    }
)

_SERVER_ERROR = frozenset({500, 501, 502, 503, 504, 505, 506, 507, 508, 510, 511})


def _status_code(value: object) -> int:
    """Convert an integer, or a string or number holding one, to ``int``.

    Values that are not numbers raise ``TypeError``; numbers with a
    fractional part raise ``ValueError``.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = to_number(value)
    if number != number.to_integral_value():
        raise ValueError(f"status code must be an integer: {value!r}")
    return int(Decimal(number))


def is_http_client_error(status_code: object) -> bool:
    """Return whether ``status_code`` is a known 4xx client error code."""
    return _status_code(status_code) in _CLIENT_ERROR


def is_http_redirect(status_code: object) -> bool:
    """Return whether ``status_code`` is a known 3xx redirect code."""
    return _status_code(status_code) in _REDIRECT


def is_http_server_error(status_code: object) -> bool:
    """Return whether ``status_code`` is a known 5xx server error code."""
    return _status_code(status_code) in _SERVER_ERROR


def is_http_success(status_code: object) -> bool:
    """Return whether ``status_code`` is a known 2xx success code."""
    return _status_code(status_code) in _SUCCESS