import pytest

from src.mediacore.media.mime import (
    AUDIO_FORMATS,
    DEFAULT_MIME_TYPE,
    IMAGE_FORMATS,
    detect_media_kind,
    resolve_mime_type,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("extension", AUDIO_FORMATS)
def test_audio_formats_resolve_to_audio_types(extension):
    assert resolve_mime_type(f"voice.{extension}").startswith("audio/")


@pytest.mark.parametrize("extension", IMAGE_FORMATS)
def test_image_formats_resolve_to_image_types(extension):
    assert resolve_mime_type(f"photo.{extension}").startswith("image/")


def test_known_extensions_map_to_exact_types():
    assert resolve_mime_type("a.jpeg") == "image/jpeg"
    assert resolve_mime_type("a.mp3") == "audio/mpeg"
    assert resolve_mime_type("a.m4a") == "audio/mp4"


def test_lookup_ignores_extension_case():
    assert resolve_mime_type("MENU.PNG") == "image/png"
    assert resolve_mime_type("nota.OGG") == "audio/ogg"


@pytest.mark.parametrize("filename", ["file.xyz", "no_extension", "", None, ".ogg.bak"])
def test_unknown_extensions_fall_back_to_octet_stream(filename):
    assert resolve_mime_type(filename) == DEFAULT_MIME_TYPE


def test_detect_media_kind_for_voice_notes_and_images():
    assert detect_media_kind("ptt") == "audio"
    assert detect_media_kind("audio") == "audio"
    assert detect_media_kind("document", "audio/ogg; codecs=opus") == "audio"
    assert detect_media_kind("image") == "image"
    assert detect_media_kind("document", "image/webp") == "image"


def test_detect_media_kind_rejects_text_messages():
    assert detect_media_kind("chat") is None
    assert detect_media_kind(None, None) is None
    assert detect_media_kind("document", "application/pdf") is None
