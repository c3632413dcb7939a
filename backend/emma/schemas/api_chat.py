from typing import Any, Literal

from pydantic import BaseModel


class ChatRequest(BaseModel):
    # Optional here so a missing message is answered with 400, not 422
    message: str | None = None
    context: str | None = None


class ChatResponse(BaseModel):
    ok: bool = True
    response: str
    model: str
    mode: Literal["live", "demo"]
    usage: dict[str, Any] | None = None


class ChatErrorResponse(BaseModel):
    ok: bool = False
    error: str
    response: str
