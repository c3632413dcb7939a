import logging
from dataclasses import dataclass

import openai
from emma.config import ProviderConfig
from emma.helpers.converting import convert_audio_to_base64
from emma.helpers.tts import generate_speech
from emma.schemas.api_speech import AudioSpeechResponse, BrowserSpeechResponse

logger = logging.getLogger(__name__)

BROWSER_TTS_MESSAGE = "Use browser SpeechSynthesis API"
TTS_UNAVAILABLE_MESSAGE = "TTS API unavailable, use browser fallback"
TTS_ERROR_MESSAGE = "TTS error, use browser fallback"


@dataclass(frozen=True)
class SpeechOutcome:
    body: AudioSpeechResponse | BrowserSpeechResponse
    status_code: int = 200
    degraded: bool = False


def truncate_speech_text(text: str, max_chars: int) -> str:
    return text[:max_chars]


def _browser_outcome(message: str, text: str) -> SpeechOutcome:
    return SpeechOutcome(
        body=BrowserSpeechResponse(message=message, text=text),
        degraded=True,
    )


async def respond_to_speech(text: str, voice: str, config: ProviderConfig) -> SpeechOutcome:
    """
    Turn text into speech, or tell the caller to speak it locally.

    1. It truncates the text to the configured character limit.
    2. Without an API key it returns the browser mode signal with the truncated text.
    3. Otherwise it generates mp3 speech with the requested voice and returns it as base 64.
    4. Any provider failure is downgraded to the browser mode signal.
    """
    trimmed_text = truncate_speech_text(text, config.tts_max_chars)

    if not config.is_live:
        return _browser_outcome(BROWSER_TTS_MESSAGE, trimmed_text)

    try:
        speech_bytes = await generate_speech(trimmed_text, voice, config)
    except openai.APIStatusError as e:
        logger.error("OpenAI TTS error (%s): %s", e.status_code, e.message)
        return _browser_outcome(TTS_UNAVAILABLE_MESSAGE, trimmed_text)
    except Exception:
        logger.exception("TTS error")
        return _browser_outcome(TTS_ERROR_MESSAGE, trimmed_text)

    return SpeechOutcome(
        body=AudioSpeechResponse(
            audio=convert_audio_to_base64(speech_bytes),
            format="mp3",
            voice=voice,
        )
    )
