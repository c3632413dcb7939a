import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL")
OPENAI_CHAT_MODEL = os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini")
OPENAI_TTS_MODEL = os.getenv("OPENAI_TTS_MODEL", "tts-1")
OPENAI_TIMEOUT_SECONDS = float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30"))
TTS_MAX_CHARS = int(os.getenv("TTS_MAX_CHARS", "1000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class ProviderConfig:
    """Everything the responders need to know about the OpenAI provider."""

    api_key: str | None = None
    base_url: str | None = None
    chat_model: str = "gpt-4o-mini"
    tts_model: str = "tts-1"
    timeout_seconds: float = 30.0
    tts_max_chars: int = 1000

    @property
    def is_live(self) -> bool:
        # An empty key counts as missing
        return bool(self.api_key)

    @property
    def mode(self) -> str:
        return "live" if self.is_live else "demo"


provider_config = ProviderConfig(
    api_key=OPENAI_API_KEY or None,
    base_url=OPENAI_BASE_URL or None,
    chat_model=OPENAI_CHAT_MODEL,
    tts_model=OPENAI_TTS_MODEL,
    timeout_seconds=OPENAI_TIMEOUT_SECONDS,
    tts_max_chars=TTS_MAX_CHARS,
)


def get_provider_config() -> ProviderConfig:
    return provider_config
