"""Realtime session data models."""

from typing import Any

from pydantic import BaseModel, Field


class TurnDetection(BaseModel):
    """Server-side voice activity detection settings."""

    type: str = "server_vad"
    threshold: float = Field(..., ge=0.0, le=1.0)
    silence_duration_ms: int = Field(..., ge=0)


class RealtimeSessionRequest(BaseModel):
    """Request body sent to the realtime session-creation endpoint."""

    model: str
    voice: str
    turn_detection: TurnDetection
    tools: list[dict[str, Any]] = Field(default_factory=list)
    instructions: str


class EphemeralTokenResponse(BaseModel):
    """Response model returned to the browser client."""

    client_secret: Any


class ErrorResponse(BaseModel):
    """Generic error body for local faults."""

    error: str
