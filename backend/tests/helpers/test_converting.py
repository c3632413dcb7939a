from unittest.mock import patch

from emma.helpers.converting import convert_audio_to_base64


@patch("emma.helpers.converting.base64.b64encode")
def test_convert_audio_to_base64(mock_b64encode):
    # Arrange
    mock_audio = b"test audio content"
    mock_b64encode.return_value = b"dGVzdCBhdWRpbyBjb250ZW50"

    # Act
    result = convert_audio_to_base64(mock_audio)

    # Assert
    mock_b64encode.assert_called_once_with(mock_audio)
    assert result == "dGVzdCBhdWRpbyBjb250ZW50"


def test_convert_audio_to_base64_integration():
    assert convert_audio_to_base64(b"test") == "dGVzdA=="
