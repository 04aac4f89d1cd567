"""Pydantic models for request and response bodies."""

from pydantic import BaseModel, Field


class CreateEventRequest(BaseModel):
    """Body of ``POST /createEvent``."""

    summary: str
    start: str = Field(..., description="RFC 3339 start, e.g. 2024-01-01T09:00:00")
    end: str = Field(..., description="RFC 3339 end")


class CreateEventResponse(BaseModel):
    success: bool
    eventId: str


class AuthUrlResponse(BaseModel):
    authUrl: str


class StatusResponse(BaseModel):
    authorized: bool
