import base64


def convert_audio_to_base64(audio: bytes) -> str:
    return base64.b64encode(audio).decode("utf-8")
