from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse
from emma.config import ProviderConfig, get_provider_config
from emma.helpers.chat import respond_to_chat
from emma.schemas.api_chat import ChatErrorResponse, ChatRequest, ChatResponse
from emma.schemas.api_error import ErrorResponse

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    status_code=200,
    responses={
        400: {"model": ErrorResponse, "description": "Message is missing"},
        500: {
            "model": ChatErrorResponse,
            "description": "LLM call failed, fallback response included",
        },
    },
)
async def chat(
    payload: ChatRequest,
    config: ProviderConfig = Depends(get_provider_config),
):
    """
    Chat with EMMA.

    1. It validates that a message was sent.
    2. It answers with the LLM when an API key is configured, otherwise with a canned fallback.
    3. If the LLM fails, it responds with status 500 and still includes a fallback response.
    """
    if not payload.message:
        raise HTTPException(status_code=400, detail="Message is required")

    outcome = await respond_to_chat(payload.message, payload.context, config)

    return JSONResponse(
        status_code=outcome.status_code,
        content=outcome.body.model_dump(exclude_none=True),
    )


@router.options("/chat", status_code=200)
async def chat_preflight():
    return Response(status_code=200)
