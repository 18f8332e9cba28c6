"""
Unit tests for inline image helpers.
"""
import base64
import pytest
from medvoice.utilities.image_utils import (
    decode_image,
    file_to_data_uri,
    image_marker,
    to_data_uri,
)


def test_bare_base64_becomes_jpeg_data_uri():
    assert to_data_uri("abc123") == "data:image/jpeg;base64,abc123"


def test_data_uri_is_kept_as_given():
    uri = "data:image/png;base64,iVBORw0KGgo="
    assert to_data_uri(uri) == uri
    assert image_marker(uri) == f" [Image: {uri}]"


def test_decode_strips_data_uri_prefix():
    raw = b"\xff\xd8\xff\xe0jpeg"
    encoded = base64.b64encode(raw).decode()
    assert decode_image(encoded) == raw
    assert decode_image(f"data:image/jpeg;base64,{encoded}") == raw


def test_decode_tolerates_missing_padding():
    assert decode_image("abc123") == base64.b64decode("abc123==")


def test_file_to_data_uri(tmp_path):
    image = tmp_path / "rash.png"
    image.write_bytes(b"\x89PNG\r\n")
    assert file_to_data_uri(image) == "data:image/png;base64," + base64.b64encode(b"\x89PNG\r\n").decode()


def test_file_to_data_uri_rejects_non_images(tmp_path):
    notes = tmp_path / "notes.txt"
    notes.write_text("not an image")
    with pytest.raises(ValueError):
        file_to_data_uri(notes)
