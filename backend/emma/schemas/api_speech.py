from typing import Literal

from pydantic import BaseModel


class SpeechRequest(BaseModel):
    text: str | None = None
    voice: str = "nova"


class BrowserSpeechResponse(BaseModel):
    ok: bool = True
    mode: Literal["browser"] = "browser"
    message: str
    text: str


class AudioSpeechResponse(BaseModel):
    ok: bool = True
    mode: Literal["openai"] = "openai"
    audio: str  # base 64
    format: str = "mp3"
    voice: str
