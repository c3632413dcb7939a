import httpx
from openai import AsyncOpenAI
from emma.config import ProviderConfig


def build_client(config: ProviderConfig) -> AsyncOpenAI:
    # No SDK retries: a failed call goes straight to the fallback
    return AsyncOpenAI(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=httpx.Timeout(config.timeout_seconds),
        max_retries=0,
    )
