"""Predicates for checking numbers, network addresses, HTTP status codes, strings, lists, maps and timestamps."""

__version__ = "0.1.0"
__all__ = ["checks", "http_status", "network", "numeric", "registry"]