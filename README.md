# assertkit

A set of small predicates, each answering one yes-or-no question: is this
number in range, is this string a valid CIDR block, is this HTTP status code a
client error, has this timestamp passed. Every check returns a `bool`.

The package has no dependencies outside the standard library.

## Installation

```
pip install assertkit
```

To run the tests:

```
pip install "assertkit[test]"
pytest
```

## Numbers

`assertkit.numeric` compares numbers exactly. Every argument goes through
`to_number`, which turns ints, floats, `Decimal`, `Fraction` and numeric
strings into an exact `Decimal`. Booleans, `None` and non-numeric objects
raise `TypeError`. Strings that are not numbers, and infinities or NaN, raise
`ValueError`.

```python
from assertkit.numeric import between, equal, greater, greater_or_equal, to_number

between(1, 10, 5)                    # True: begin <= number <= end
between(1, 10, 11)                   # False
equal(43234.43234, 43234.43234)      # True
greater(200, 500)                    # True: is 500 greater than 200?
greater(105, 100)                    # False
greater_or_equal(1000000, 1000000)   # True
to_number("  2.5 ")                  # Decimal('2.5')
```

The value compared against comes first. The value being checked comes second.

## Network addresses

`assertkit.network` checks IP addresses and CIDR prefixes. If the argument is
not a string, the check returns `False`. IPv4-mapped IPv6 addresses such as
`::ffff:10.0.0.1` count as IPv4. Addresses with a zone (`fe80::1%eth0`) are
rejected.

```python
from assertkit.network import is_cidr, is_cidrv4, is_cidrv6, is_ip, is_ipv4, is_ipv6

is_cidr("10.1.0.0/16")       # True
is_cidr("10.0.0.1")          # False: no prefix length
is_cidrv4("0.0.0.0/0")       # True
is_cidrv6("::/0")            # True
is_cidrv6("10.0.0.1/24")     # False
is_ip("10.0.0.1/16")         # False: this is a prefix, not an address
is_ipv4("10.1.0.0")          # True
is_ipv6("10.0.0.1")          # False
```

## HTTP status codes

`assertkit.http_status` accepts an integer status code, or a string or number
holding a whole number, such as `"201"`. A value with a fractional part raises
`ValueError`. A value that is not a number raises `TypeError`.

```python
from assertkit.http_status import (
    is_http_success, is_http_redirect, is_http_client_error, is_http_server_error,
)

is_http_success(201)         # True
is_http_redirect(308)        # True
is_http_client_error(403)    # True
is_http_server_error(503)    # True
is_http_success("403")       # False
```

Only registered status codes are recognised. A code that falls in the right
hundred but is not registered, such as 299 or 306, returns `False`.

## Strings, collections and time

`assertkit.checks` compares elements, strings and keys by their string form.
Booleans become `"true"`/`"false"`. Numbers become their shortest plain
decimal text, so `2`, `2.0` and `"2"` all match.

```python
from assertkit.checks import (
    contains, is_empty, ends_with, parse_rfc3339, is_expired, is_false, has_key,
)

contains(["a", "b", "c"], "b")           # True
contains([-1.0, -2, -3.0], -2.0)         # True
is_empty("")                             # True
is_empty("   ")                          # False
ends_with("world", "hello world")        # True
ends_with("", "hello world")             # True
is_expired("2024-01-01T00:00:00Z")       # True once that moment has passed
is_expired("abc")                        # False: unparseable counts as not expired
is_false(False)                          # True
has_key("key1", {"key1": "value1"})      # True
has_key("key1", None)                    # False
```

`is_false` accepts a `bool` or the strings `"true"` and `"false"`. Passing
`None` to `contains`, `is_empty`, `ends_with` or `is_false` raises `TypeError`.

`parse_rfc3339` returns a timezone-aware `datetime`. It raises `ValueError` for
text that is not an RFC 3339 timestamp:

```python
parse_rfc3339("2024-05-01T12:30:00.5+02:00")
```

## Calling checks by name

`assertkit.registry` holds every check under a short name:

`between`, `equal`, `greater`, `greater_or_equal`, `cidr`, `cidrv4`, `cidrv6`,
`ip`, `ipv4`, `ipv6`, `http_client_error`, `http_redirect`,
`http_server_error`, `http_success`, `contains`, `empty`, `ends_with`,
`expired`, `false` and `key`.

Each check is a `FunctionDefinition` with a `name`, a `summary` and a tuple of
`Parameter` objects. Each `Parameter` has a `ParameterKind`: `NUMBER`,
`STRING`, `BOOL`, `INT64`, `LIST_OF_STRING` or `MAP_OF_STRING`.

`FunctionDefinition.run` works in three steps:

1. It checks the argument count.
2. It converts each argument with `Parameter.convert`.
3. It runs the check.

Any argument that is rejected raises `ArgumentError`, a subclass of
`ValueError`.

```python
from assertkit.registry import ArgumentError, call, function_names, get_function

function_names()                 # ['between', 'cidr', 'cidrv4', ...]
call("between", 1, 10, 5)        # True
get_function("empty").summary    # 'Checks whether a given string is empty'

try:
    call("empty", None)
except ArgumentError as exc:
    print(exc)   # Invalid value for "s" parameter: argument must not be null.

try:
    call("equal", [1, 2, 3], [1, 2, 3])
except ArgumentError as exc:
    print(exc)   # includes: Invalid value for "number" parameter: number required.
```

`get_function` raises `KeyError` for an unknown name.

## What it does not do

assertkit is a library only. It has no command-line tool and no
configuration-language integration. It does not evaluate expressions or
configuration files. To use a check, call it from Python, directly or by name
through `assertkit.registry`.