"""Application services shared across request handlers."""

from .hello_service import SERVICE_GREETING, HelloService

__all__ = ["HelloService", "SERVICE_GREETING"]
