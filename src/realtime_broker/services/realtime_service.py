"""OpenAI Realtime service for ephemeral session creation."""

import logging

import httpx

from ..models.session import RealtimeSessionRequest

logger = logging.getLogger(__name__)


class RealtimeSessionError(Exception):
    """Base error for realtime session creation."""


class UpstreamRejectedError(RealtimeSessionError):
    """The session endpoint answered with a non-success status."""

    def __init__(self, status_code: int, body: bytes, content_type: str | None = None):
        super().__init__(f"Realtime session request rejected with status {status_code}")
        self.status_code = status_code
        self.body = body
        self.content_type = content_type


class MalformedUpstreamResponseError(RealtimeSessionError):
    """The session endpoint answered successfully but without a client secret."""


class RealtimeSessionService:
    """Service for minting ephemeral OpenAI Realtime sessions."""

    def __init__(self, api_key: str, sessions_url: str, timeout: float = 30.0):
        self.sessions_url = sessions_url
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def create_session(self, request: RealtimeSessionRequest) -> dict:
        """Create a realtime session and return the upstream JSON body.

        Exactly one request is made; failures are never retried.
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                self.sessions_url,
                json=request.model_dump(),
                headers=self.headers,
            )

        if not response.is_success:
            logger.warning(f"Realtime session request rejected: {response.status_code}")
            raise UpstreamRejectedError(
                status_code=response.status_code,
                body=response.content,
                content_type=response.headers.get("content-type"),
            )

        return response.json()

    async def create_client_secret(self, request: RealtimeSessionRequest):
        """Create a realtime session and return only its client secret."""
        data = await self.create_session(request)
        if not isinstance(data, dict) or "client_secret" not in data:
            raise MalformedUpstreamResponseError("Realtime session response has no client_secret")
        return data["client_secret"]
