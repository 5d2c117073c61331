"""Use cases for producing greeting messages."""

from app.domain.entities.hello_message import HelloMessage


STRING_GREETING = "Hello string!"
DATA_GREETING = "Hello data!"


def hello_string() -> str:
    """Return the literal greeting served as plain text."""

    return STRING_GREETING


def create_hello_message(text: str = DATA_GREETING) -> HelloMessage:
    """Return a greeting value object carrying ``text``.

    Without an argument the data endpoint greeting is used.
    """

    return HelloMessage(text=text)
