"""Service that produces the greeting returned by the service endpoint."""

import logging

logger = logging.getLogger(__name__)

SERVICE_GREETING = "Hello service!"


class HelloService:
    """Stateless provider of the service greeting."""

    def get_hello(self) -> str:
        logger.debug("Producing service greeting")
        return SERVICE_GREETING


__all__ = ["HelloService", "SERVICE_GREETING"]
