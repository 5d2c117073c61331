"""Domain entities exposed by the application."""

from .hello_message import HelloMessage

__all__ = ["HelloMessage"]
