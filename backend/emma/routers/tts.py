from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse
from emma.config import ProviderConfig, get_provider_config
from emma.helpers.speech import respond_to_speech
from emma.schemas.api_error import ErrorResponse
from emma.schemas.api_speech import AudioSpeechResponse, BrowserSpeechResponse, SpeechRequest

router = APIRouter(prefix="/api", tags=["tts"])


@router.post(
    "/tts",
    response_model=AudioSpeechResponse | BrowserSpeechResponse,
    status_code=200,
    responses={400: {"model": ErrorResponse, "description": "Text is missing"}},
)
async def text_to_speech(
    payload: SpeechRequest,
    config: ProviderConfig = Depends(get_provider_config),
):
    """
    Generate EMMA's voice for a text.

    Text is cut to the configured character limit. Returns mp3 audio in base 64,
    or `mode=browser` with the text when the client should use its own speech synthesis.
    """
    if not payload.text:
        raise HTTPException(status_code=400, detail="Text is required")

    outcome = await respond_to_speech(payload.text, payload.voice, config)
    return JSONResponse(status_code=outcome.status_code, content=outcome.body.model_dump())


@router.options("/tts", status_code=200)
async def tts_preflight():
    return Response(status_code=200)
