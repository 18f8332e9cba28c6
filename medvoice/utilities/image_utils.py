"""
Helpers for images passed inline as base64 strings or data URIs.
"""
import base64
import binascii
import mimetypes
from pathlib import Path
from typing import Union

DEFAULT_IMAGE_MIME = "image/jpeg"


def to_data_uri(image: str) -> str:
    """Return the image as a data URI, assuming JPEG for bare base64."""
    if image.startswith("data:"):
        return image
    return f"data:{DEFAULT_IMAGE_MIME};base64,{image}"


def image_marker(image: str) -> str:
    """Marker appended to the user's message text for an attached image."""
    return f" [Image: {to_data_uri(image)}]"


def decode_image(image: str) -> bytes:
    """
    Decode a base64 image or data URI into raw bytes.

    Missing padding is tolerated; an empty payload is not.

    Raises:
        ValueError: If the payload is not valid base64
    """
    payload = image.partition(",")[2] if image.startswith("data:") else image
    payload = payload.strip()
    if not payload:
        raise ValueError("Invalid image data: empty payload")
    payload +="=" * (-len(payload) % 4)
    try:
        return base64.b64decode(payload)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid image data: {e}")


def file_to_data_uri(path: Union[str, Path]) -> str:
    """
    Read an image file and encode it as a data URI.

    Raises:
        ValueError: If the file is not an image
    """
    path = Path(path)
    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        raise ValueError(f"Not an image file: {path.name}")
    encoded = base64.b64encode(path.read_bytes()).decode()
    return f"data:{mime_type};base64,{encoded}"
