"""Ephemeral realtime credential endpoint."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from ...config import Settings
from ...intake import load_intake_contract
from ...models.session import (
    EphemeralTokenResponse,
    ErrorResponse,
    RealtimeSessionRequest,
    TurnDetection,
)
from ...services.realtime_service import RealtimeSessionService, UpstreamRejectedError

router = APIRouter()
logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def build_session_request(settings: Settings) -> RealtimeSessionRequest:
    """Build a fresh session request document."""
    contract = load_intake_contract(settings.intake_contract_dir)
    return RealtimeSessionRequest(
        model=settings.realtime_model,
        voice=settings.realtime_voice,
        turn_detection=TurnDetection(
            type="server_vad",
            threshold=settings.vad_threshold,
            silence_duration_ms=settings.vad_silence_duration_ms,
        ),
        tools=contract.tools,
        instructions=contract.instructions,
    )


@router.get(
    "/ephemeral",
    response_model=EphemeralTokenResponse,
    responses={500: {"model": ErrorResponse}},
)
async def issue_ephemeral_credential(settings: Settings = Depends(get_app_settings)):
    """
    Mint a short-lived client secret for the OpenAI Realtime API.

    The browser uses the returned secret to open a realtime session directly,
    without ever seeing the server's API key. Upstream rejections are relayed
    with their original status and body.
    """
    realtime = RealtimeSessionService(
        api_key=settings.openai_api_key,
        sessions_url=settings.realtime_sessions_url,
        timeout=settings.realtime_request_timeout,
    )

    try:
        session_request = build_session_request(settings)
        client_secret = await realtime.create_client_secret(session_request)
    except UpstreamRejectedError as e:
        return Response(
            content=e.body,
            status_code=e.status_code,
            media_type=e.content_type,
        )
    except Exception:
        logger.exception("Realtime session init failed")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="realtime init failed").model_dump(),
        )

    return EphemeralTokenResponse(client_secret=client_secret)
