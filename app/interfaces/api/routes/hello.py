"""Greeting routes served under the ``/hello`` prefix."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.application.services import HelloService
from app.application.use_cases.hello import create_hello_message, hello_string
from app.domain.entities import HelloMessage
from app.interfaces.api.dependencies import get_hello_service
from app.interfaces.api.schemas import HelloMessageRead

router = APIRouter(prefix="/hello", tags=["hello"])


@router.get("/string", response_class=PlainTextResponse)
async def get_hello_string() -> str:
    """Return a literal greeting as plain text."""

    return hello_string()


@router.get("/service", response_class=PlainTextResponse)
async def get_hello_from_service(
    service: HelloService = Depends(get_hello_service),
) -> str:
    """Return the greeting produced by :class:`HelloService`."""

    return service.get_hello()


@router.get("/data", response_model=HelloMessageRead)
async def get_hello_data() -> HelloMessage:
    """Return a greeting value object serialized as JSON."""

    return create_hello_message()
