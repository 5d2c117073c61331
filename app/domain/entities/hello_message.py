from dataclasses import dataclass


@dataclass(frozen=True)
class HelloMessage:
    """Represents the payload returned by the data greeting endpoint."""

    text: str


__all__ = ["HelloMessage"]
