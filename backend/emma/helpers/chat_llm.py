from dataclasses import dataclass
from typing import Any

from emma.config import ProviderConfig
from emma.helpers.openai_client import build_client

EMPTY_COMPLETION_REPLY = "I apologize, I could not process that request."


@dataclass
class LLMReply:
    content: str
    model: str
    usage: dict[str, Any] | None = None


async def chat_with_llm(
    messages: list[dict],
    config: ProviderConfig,
    max_tokens: int = 500,
    temperature: float = 0.7,
) -> LLMReply:
    async with build_client(config) as client:
        response = await client.chat.completions.create(
            model=config.chat_model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )

    content = None
    if response.choices:
        content = response.choices[0].message.content

    usage = response.usage.model_dump() if response.usage else None
    return LLMReply(
        content=content or EMPTY_COMPLETION_REPLY,
        model=config.chat_model,
        usage=usage,
    )
