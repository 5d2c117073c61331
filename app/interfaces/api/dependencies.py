"""FastAPI dependency utilities."""

from app.application.services import HelloService

_hello_service = HelloService()


def get_hello_service() -> HelloService:
    """Return the shared :class:`HelloService` instance."""

    return _hello_service
