"""Unit tests for image utility functions."""

import base64
from io import BytesIO
from types import SimpleNamespace

import pytest
from PIL import Image

from sweather.utils.exceptions import ImageReadError
from sweather.utils.image_utils import (
    data_uri_mime_type,
    decode_data_uri,
    encode_file,
    image_width,
    resize_data_uri,
    strip_data_uri_header,
)


class TestEncodeFile:
    """Test reading uploads into data URIs."""

    def test_encode_path(self, image_file, wide_png):
        """Test encoding a file on disk guesses the MIME type from its name."""
        data_uri = encode_file(image_file)

        assert data_uri.startswith("data:image/png;base64,")
        assert decode_data_uri(data_uri) == wide_png

    def test_encode_upload(self, narrow_png):
        """Test encoding an object shaped like a Streamlit upload."""
        upload = SimpleNamespace(name="tee.png", type="image/png", getvalue=lambda: narrow_png)

        data_uri = encode_file(upload)

        assert data_uri_mime_type(data_uri) == "image/png"
        assert decode_data_uri(data_uri) == narrow_png

    def test_encode_file_like_with_explicit_type(self, narrow_png):
        """Test an explicit MIME type wins."""
        data_uri = encode_file(BytesIO(narrow_png), mime_type="image/webp")

        assert data_uri.startswith("data:image/webp;base64,")

    def test_unknown_type_falls_back(self):
        """Test unknown files are labeled application/octet-stream."""
        data_uri = encode_file(BytesIO(b"\x00\x01"))

        assert data_uri_mime_type(data_uri) == "application/octet-stream"

    def test_missing_file(self, tmp_path):
        """Test unreadable files raise ImageReadError."""
        with pytest.raises(ImageReadError) as exc_info:
            encode_file(tmp_path / "missing.jpg")

        assert exc_info.value.code == "IMAGE_READ"


class TestDataUriHelpers:
    """Test data URI parsing helpers."""

    def test_strip_header(self):
        assert strip_data_uri_header("data:image/jpeg;base64,QUJD") == "QUJD"

    def test_strip_header_leaves_bare_base64(self):
        assert strip_data_uri_header("QUJD") == "QUJD"

    def test_mime_type_of_non_uri(self):
        assert data_uri_mime_type("https://picsum.photos/300") is None

    def test_decode_rejects_url(self):
        """Test decoding something that is not a data URI."""
        with pytest.raises(ValueError):
            decode_data_uri("https://picsum.photos/300")

    def test_decode_rejects_bad_base64(self):
        with pytest.raises(ValueError):
            decode_data_uri("data:image/png;base64,@@not-base64@@")

    def test_image_width(self, wide_data_uri):
        assert image_width(wide_data_uri) == 1200


class TestResizeDataUri:
    """Test upload downsampling."""

    def test_narrow_image_unchanged(self, narrow_data_uri):
        """Test images within the bound are returned exactly."""
        assert resize_data_uri(narrow_data_uri, max_width=400) == narrow_data_uri

    def test_image_at_bound_unchanged(self):
        """Test an image exactly at the bound is not re-encoded."""
        img = Image.new("RGB", (400, 100), color=(0, 0, 255))
        buffer = BytesIO()
        img.save(buffer, format="PNG")
        data_uri = "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")

        assert resize_data_uri(data_uri, max_width=400) == data_uri

    def test_wide_image_scaled_to_bound(self, wide_data_uri):
        """Test wide images are scaled proportionally and re-encoded as JPEG."""
        resized = resize_data_uri(wide_data_uri, max_width=400)

        assert resized != wide_data_uri
        assert resized.startswith("data:image/jpeg;base64,")

        with Image.open(BytesIO(decode_data_uri(resized))) as img:
            assert img.format == "JPEG"
            assert img.size == (400, 200)

    def test_custom_width(self, wide_data_uri):
        resized = resize_data_uri(wide_data_uri, max_width=300, quality=50)

        assert image_width(resized) == 300

    def test_transparent_image(self):
        """Test RGBA images are flattened for JPEG output."""
        img = Image.new("RGBA", (800, 800), color=(10, 200, 10, 128))
        buffer = BytesIO()
        img.save(buffer, format="PNG")
        data_uri = "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")

        resized = resize_data_uri(data_uri, max_width=400)

        with Image.open(BytesIO(decode_data_uri(resized))) as out:
            assert out.mode == "RGB"
            assert out.size == (400, 400)

    def test_undecodable_image_passed_through(self):
        """Test data that is not an image is returned as-is."""
        data_uri = "data:image/png;base64," + base64.b64encode(b"not an image").decode("ascii")

        assert resize_data_uri(data_uri) == data_uri

    def test_oversized_image_passed_through(self, wide_data_uri, monkeypatch):
        """Test an image over Pillow's pixel limit is returned as-is."""
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

        assert resize_data_uri(wide_data_uri) == wide_data_uri

    def test_url_passed_through(self):
        """Test demo item URLs are returned as-is."""
        url = "https://picsum.photos/id/1005/300/300"

        assert resize_data_uri(url) == url
