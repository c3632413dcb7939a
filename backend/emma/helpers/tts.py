from emma.config import ProviderConfig
from emma.helpers.openai_client import build_client


async def generate_speech(
    text: str,
    voice_name: str,
    config: ProviderConfig,
    file_format: str = "mp3",
) -> bytes:
    async with build_client(config) as client:
        binary_response = await client.audio.speech.create(
            model=config.tts_model,
            voice=voice_name,
            input=text,
            response_format=file_format,
        )

        return binary_response.content
