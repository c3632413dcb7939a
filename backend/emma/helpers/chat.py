import logging
from dataclasses import dataclass

from emma.config import ProviderConfig
from emma.helpers.chat_llm import chat_with_llm
from emma.helpers.fallback import get_smart_fallback
from emma.helpers.prompts import build_chat_messages
from emma.schemas.api_chat import ChatErrorResponse, ChatResponse

logger = logging.getLogger(__name__)

FALLBACK_MODEL_NAME = "fallback"


@dataclass(frozen=True)
class ChatOutcome:
    body: ChatResponse | ChatErrorResponse
    status_code: int = 200
    degraded: bool = False


async def respond_to_chat(
    message: str, context: str | None, config: ProviderConfig
) -> ChatOutcome:
    """
    Answer a chat message with EMMA.

    1. Without an API key it answers from the canned fallback responses (demo mode).
    2. Otherwise it builds the EMMA system prompt with the optional context and asks the LLM.
    3. If the LLM call fails, it still returns the fallback text, flagged with status 500.
    """
    if not config.is_live:
        logger.info("No OPENAI_API_KEY configured, using smart fallback")
        return ChatOutcome(
            body=ChatResponse(
                response=get_smart_fallback(message),
                model=FALLBACK_MODEL_NAME,
                mode="demo",
            ),
            degraded=True,
        )

    messages = build_chat_messages(message, context)

    try:
        reply = await chat_with_llm(messages, config)
    except Exception as e:
        logger.exception("EMMA chat error")
        return ChatOutcome(
            body=ChatErrorResponse(
                error=str(e) or e.__class__.__name__,
                response=get_smart_fallback(message),
            ),
            status_code=500,
            degraded=True,
        )

    return ChatOutcome(
        body=ChatResponse(
            response=reply.content,
            model=reply.model,
            mode="live",
            usage=reply.usage,
        )
    )
