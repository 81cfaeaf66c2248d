"""Data models for the realtime session broker."""

from .session import (
    EphemeralTokenResponse,
    ErrorResponse,
    RealtimeSessionRequest,
    TurnDetection,
)

__all__ = [
    "EphemeralTokenResponse",
    "ErrorResponse",
    "RealtimeSessionRequest",
    "TurnDetection",
]
