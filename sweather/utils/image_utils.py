"""Image helpers for uploaded clothing photos.

Uploaded photos are kept as data-URI strings. They are downsampled to a
bounded width before being stored so the persisted wardrobe stays small.
"""

import base64
import binascii
import mimetypes
import re
from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image

from sweather.utils.exceptions import ImageReadError
from sweather.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_WIDTH = 400
DEFAULT_JPEG_QUALITY = 70

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<b64>;base64)?,(?P<data>.*)$", re.DOTALL)
_IMAGE_HEADER_RE = re.compile(r"^data:image/\w+;base64,")


def encode_file(file, mime_type: Optional[str] = None) -> str:
    """Read an uploaded file into a base64 data URI.

    Args:
        file: Path, Streamlit UploadedFile, or binary file-like object
        mime_type: Explicit MIME type; otherwise taken from the upload or file name

    Returns:
        Data URI string (``data:<mime>;base64,<payload>``)

    Raises:
        ImageReadError: If the file cannot be read
    """
    name = getattr(file, "name", None) or str(file)

    try:
        if isinstance(file, (str, Path)):
            raw = Path(file).read_bytes()
        elif hasattr(file, "getvalue"):
            raw = file.getvalue()
        else:
            raw = file.read()
    except (OSError, ValueError) as e:
        raise ImageReadError(f"Failed to read {name}: {e}", source=name) from e

    if mime_type is None:
        mime_type = getattr(file, "type", None) or mimetypes.guess_type(name)[0]
    if not mime_type:
        mime_type = "application/octet-stream"

    payload = base64.b64encode(raw).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def strip_data_uri_header(value: str) -> str:
    """Remove a ``data:image/<type>;base64,`` prefix if present."""
    return _IMAGE_HEADER_RE.sub("", value, count=1)


def data_uri_mime_type(value: str) -> Optional[str]:
    """Return the MIME type declared by a data URI, or None."""
    match = _DATA_URI_RE.match(value)
    if not match:
        return None
    return match.group("mime")


def decode_data_uri(value: str) -> bytes:
    """Decode the payload of a base64 data URI.

    Args:
        value: Data URI string

    Returns:
        Raw bytes

    Raises:
        ValueError: If the value is not a base64 data URI
    """
    match = _DATA_URI_RE.match(value)
    if not match or not match.group("b64"):
        raise ValueError("Not a base64 data URI")
    try:
        return base64.b64decode(match.group("data"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e


def image_width(data_uri: str) -> int:
    """Return the pixel width of the image encoded in a data URI."""
    with Image.open(BytesIO(decode_data_uri(data_uri))) as img:
        return img.size[0]


def resize_data_uri(
    data_uri: str,
    max_width: int = DEFAULT_MAX_WIDTH,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> str:
    """Downsample an image data URI to at most ``max_width`` pixels wide.

    Images that already fit are returned unchanged. Wider images are scaled
    proportionally and re-encoded as JPEG. Anything that fails to decode is
    returned as-is.

    Args:
        data_uri: Image as a data URI
        max_width: Maximum width in pixels
        quality: JPEG quality for the re-encoded image

    Returns:
        Data URI string
    """
    try:
        raw = decode_data_uri(data_uri)
        with Image.open(BytesIO(raw)) as img:
            img.load()
            width, height = img.size

            if width <= max_width:
                return data_uri

            scale = max_width / width
            new_size = (max_width, max(1, round(height * scale)))

            # JPEG has no alpha channel
            resized = img.convert("RGB").resize(new_size, Image.Resampling.LANCZOS)
    except (ValueError, OSError, Image.DecompressionBombError) as e:
        logger.debug(f"Image decode failed, keeping original: {e}")
        return data_uri

    buffer = BytesIO()
    resized.save(buffer, format="JPEG", quality=quality, optimize=True)
    payload = base64.b64encode(buffer.getvalue()).decode("ascii")

    logger.debug(f"Resized image {width}x{height} -> {new_size[0]}x{new_size[1]}")
    return f"data:image/jpeg;base64,{payload}"
