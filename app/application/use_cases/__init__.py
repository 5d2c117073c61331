"""Aggregate application use cases."""

from .hello import create_hello_message, hello_string

__all__ = [
    "create_hello_message",
    "hello_string",
]
