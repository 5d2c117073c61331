"""Pydantic models for the greeting endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class HelloMessageRead(BaseModel):
    """JSON body of the data greeting endpoint."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    text: str = Field(..., description="Greeting text")
