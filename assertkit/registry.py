"""Named check functions with typed, validated parameters."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from assertkit import checks, http_status, network, numeric
from assertkit.checks import _as_string
from assertkit.numeric import to_number

__all__ = [
    "MINIMAL_REQUIRED_TERRAFORM_VERSION",
    "ArgumentError",
    "ParameterKind",
    "Parameter",
    "FunctionDefinition",
    "function_names",
    "get_function",
    "call",
]

MINIMAL_REQUIRED_TERRAFORM_VERSION = "1.8.0-beta1"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ArgumentError(ValueError):
    """An argument could not be accepted for a function parameter."""

    def __init__(self, message: str, parameter: str | None = None) -> None:
        self.parameter = parameter
        self.reason = message
        if parameter is None:
            text = message
        else:
            text = f'Invalid value for "{parameter}" parameter: {message}.'
        super().__init__(text)


class ParameterKind(enum.Enum):
    """The type a parameter accepts."""

    NUMBER = "number"
    STRING = "string"
    BOOL = "bool"
    INT64 = "int64"
    LIST_OF_STRING = "list(string)"
    MAP_OF_STRING = "map(string)"


def _convert_number(value: object) -> Decimal:
    try:
        return to_number(value)
    except TypeError:
        raise ValueError("number required") from None
    except ValueError:
        raise ValueError("a number is required") from None


def _convert_int64(value: object) -> int:
    number = _convert_number(value)
    if number != number.to_integral_value():
        raise ValueError("value must be a whole number")
    result = int(number)
    if not _INT64_MIN <= result <= _INT64_MAX:
        raise ValueError("value must fit in a 64-bit integer")
    return result


def _convert_string(value: object) -> str:
    try:
        return _as_string(value)
    except (TypeError, ValueError):
        raise ValueError("string required") from None


def _convert_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError("bool required")


def _convert_list(value: object) -> tuple[str, ...]:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise ValueError("list of string required")
    try:
        return tuple(_as_string(item) for item in value)
    except (TypeError, ValueError):
        raise ValueError("list of string required") from None


def _convert_map(value: object) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise ValueError("map of string required")
    try:
        return {_as_string(key): _as_string(item) for key, item in value.items()}
    except (TypeError, ValueError):
        raise ValueError("map of string required") from None


_CONVERTERS: dict[ParameterKind, Callable[[object], object]] = {
    ParameterKind.NUMBER: _convert_number,
    ParameterKind.STRING: _convert_string,
    ParameterKind.BOOL: _convert_bool,
    ParameterKind.INT64: _convert_int64,
    ParameterKind.LIST_OF_STRING: _convert_list,
    ParameterKind.MAP_OF_STRING: _convert_map,
}


@dataclass(frozen=True)
class Parameter:
    """One named, typed parameter of a function."""

    name: str
    kind: ParameterKind
    description: str = ""

    def convert(self, value: object) -> object:
        """Convert ``value`` to this parameter's type or raise ``ArgumentError``."""
        if value is None:
            raise ArgumentError("argument must not be null", self.name)
        try:
            return _CONVERTERS[self.kind](value)
        except ValueError as exc:
            raise ArgumentError(str(exc), self.name) from None


@dataclass(frozen=True)
class FunctionDefinition:
    """A named check function with its parameters and implementation."""

    name: str
    summary: str
    parameters: tuple[Parameter, ...]
    implementation: Callable[..., bool]

    def run(self, *args: object) -> bool:
        """Validate ``args`` against the parameters and run the check."""
        expected = len(self.parameters)
        if len(args) < expected:
            raise ArgumentError(
                f"Not enough function arguments: {self.name} takes {expected}, "
                f"got {len(args)}"
            )
        if len(args) > expected:
            raise ArgumentError(
                f"Too many function arguments: {self.name} takes {expected}, "
                f"got {len(args)}"
            )
        values = []
        errors: list[ArgumentError] = []
        for parameter, argument in zip(self.parameters, args):
            try:
                values.append(parameter.convert(argument))
            except ArgumentError as exc:
                errors.append(exc)
        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise ArgumentError("\n".join(str(error) for error in errors))
        return bool(self.implementation(*values))


def _number(name: str, description: str) -> Parameter:
    return Parameter(name, ParameterKind.NUMBER, description)


def _string(name: str, description: str) -> Parameter:
    return Parameter(name, ParameterKind.STRING, description)


def _status(name: str = "status_code") -> Parameter:
    return Parameter(name, ParameterKind.INT64, "The HTTP status code to check")


_COMPARISON = (
    _number("compare_against", "The number to compare against"),
    _number("number", "The number to check"),
)

_DEFINITIONS = (
    FunctionDefinition(
        "between",
        "Checks whether a number is within a given range",
        (
            _number("begin", "The beginning of the range"),
            _number("end", "The end of the range"),
            _number("number", "The number to check"),
        ),
        numeric.between,
    ),
    FunctionDefinition(
        "equal",
        "Checks whether a number is equal to another number",
        (
            _number("compare_against", "The number to compare against"),
            _number("number", "The number to compare"),
        ),
        numeric.equal,
    ),
    FunctionDefinition(
        "greater",
        "Checks whether a number is greater than a given number",
        _COMPARISON,
        numeric.greater,
    ),
    FunctionDefinition(
        "greater_or_equal",
        "Checks whether a number is greater than or equal to a given number",
        _COMPARISON,
        numeric.greater_or_equal,
    ),
    FunctionDefinition(
        "cidr",
        "Checks whether a string is a valid CIDR notation (IPv4 or IPv6)",
        (_string("prefix", "The string to check"),),
        network.is_cidr,
    ),
    FunctionDefinition(
        "cidrv4",
        "Checks whether a string is a valid CIDR notation (IPv4)",
        (_string("prefix", "The string to check"),),
        network.is_cidrv4,
    ),
    FunctionDefinition(
        "cidrv6",
        "Checks whether a string is a valid CIDR notation (IPv6)",
        (_string("prefix", "The string to check"),),
        network.is_cidrv6,
    ),
    FunctionDefinition(
        "ip",
        "Checks whether a string is a valid IP address (IPv4 or IPv6)",
        (_string("ip_address", "The string to check"),),
        network.is_ip,
    ),
    FunctionDefinition(
        "ipv4",
        "Checks whether a string is a valid IPv4 address",
        (_string("ip_address", "The string to check"),),
        network.is_ipv4,
    ),
    FunctionDefinition(
        "ipv6",
        "Checks whether a string is a valid IPv6 address",
        (_string("ip_address", "The string to check"),),
        network.is_ipv6,
    ),
    FunctionDefinition(
        "http_client_error",
        "Checks whether an HTTP status code is a client error status code",
        (_status(),),
        http_status.is_http_client_error,
    ),
    FunctionDefinition(
        "http_redirect",
        "Checks whether an HTTP status code is a redirect status code",
        (_status(),),
        http_status.is_http_redirect,
    ),
    FunctionDefinition(
        "http_server_error",
        "Checks whether an HTTP status code is a server error status code",
        (_status(),),
        http_status.is_http_server_error,
    ),
    FunctionDefinition(
        "http_success",
        "Checks whether an HTTP status code is a success status code",
        (_status(),),
        http_status.is_http_success,
    ),
    FunctionDefinition(
        "contains",
        "Checks whether an element is in a list",
        (
            Parameter("list", ParameterKind.LIST_OF_STRING, "The list to check"),
            _string("element", "The element to check"),
        ),
        checks.contains,
    ),
    FunctionDefinition(
        "empty",
        "Checks whether a given string is empty",
        (_string("s", "The string to check"),),
        checks.is_empty,
    ),
    FunctionDefinition(
        "ends_with",
        "Checks whether a string ends with another string",
        (
            _string("suffix", "The suffix to check for"),
            _string("string", "The string to check"),
        ),
        checks.ends_with,
    ),
    FunctionDefinition(
        "expired",
        "Checks whether a timestamp in RFC3339 format is expired",
        (_string("timestamp", "The string to check"),),
        checks.is_expired,
    ),
    FunctionDefinition(
        "false",
        "Checks whether a boolean value is false",
        (Parameter("bool", ParameterKind.BOOL, "The boolean value to check"),),
        checks.is_false,
    ),
    FunctionDefinition(
        "key",
        "Checks whether a key exists in a map",
        (
            _string("key", "The key to check"),
            Parameter("map", ParameterKind.MAP_OF_STRING, "The map to check"),
        ),
        checks.has_key,
    ),
)

_REGISTRY: dict[str, FunctionDefinition] = {
    definition.name: definition for definition in _DEFINITIONS
}


def function_names() -> list[str]:
    """Return the names of all registered functions, sorted."""
    return sorted(_REGISTRY)


def get_function(name: str) -> FunctionDefinition:
    """Return the function registered under ``name``; raise ``KeyError`` if none."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"unknown function: {name!r}") from None


def call(name: str, *args: object) -> bool:
    """Run the function registered under ``name`` with ``args``."""
    return get_function(name).run(*args)