"""Pytest fixtures and configuration for Sweather tests."""

import base64
from io import BytesIO
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable

import pytest
from PIL import Image

from sweather.domain.models import ClothingItem
from sweather.gateway.gemini_gateway import GeminiGateway
from sweather.storage.kv_store import MemoryStore
from sweather.storage.wardrobe_repository import WardrobeRepository
from sweather.utils.config import AppConfig, GeminiConfig, ImageConfig, StorageConfig, reset_config


# ============================================
# Configuration
# ============================================


@pytest.fixture
def test_config(tmp_path) -> AppConfig:
    """Provide test-specific configuration with a temporary store file."""
    return AppConfig(
        gemini=GeminiConfig(model="gemini-2.5-flash", api_key_env="SWEATHER_TEST_API_KEY"),
        storage=StorageConfig(
            path=str(tmp_path / "store.json"),
            key="test_wardrobe",
            quota_bytes=1024 * 1024,
        ),
        images=ImageConfig(max_width=400, jpeg_quality=70),
        log_level="DEBUG",
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the cached configuration between tests."""
    reset_config()
    yield
    reset_config()


# ============================================
# Images
# ============================================


def _png_bytes(size: tuple[int, int], mode: str = "RGB") -> bytes:
    color = (200, 30, 30, 255) if mode == "RGBA" else (200, 30, 30)
    img = Image.new(mode, size, color=color)
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def to_data_uri(raw: bytes, mime_type: str = "image/png") -> str:
    return f"data:{mime_type};base64,{base64.b64encode(raw).decode('ascii')}"


@pytest.fixture
def narrow_png() -> bytes:
    """A 120x80 PNG, narrower than the resize bound."""
    return _png_bytes((120, 80))


@pytest.fixture
def wide_png() -> bytes:
    """A 1200x600 PNG, wider than the resize bound."""
    return _png_bytes((1200, 600))


@pytest.fixture
def narrow_data_uri(narrow_png) -> str:
    return to_data_uri(narrow_png)


@pytest.fixture
def wide_data_uri(wide_png) -> str:
    return to_data_uri(wide_png)


@pytest.fixture
def image_file(tmp_path, wide_png) -> Path:
    """A wide PNG written to disk."""
    path = tmp_path / "hoodie.png"
    path.write_bytes(wide_png)
    return path


# ============================================
# Wardrobe
# ============================================


@pytest.fixture
def sample_item() -> ClothingItem:
    return ClothingItem(
        id="a",
        image_data="data:image/jpeg;base64,AAAA",
        name="Chunky Knit Sweater",
        type="Sweater",
        insulation=9,
        tags=["wool", "cream", "cozy"],
    )


@pytest.fixture
def sample_items() -> list[ClothingItem]:
    """Three items spanning the warmth range."""
    return [
        ClothingItem(id="t1", name="Linen Shirt", type="Shirt", insulation=2, tags=["linen", "white"]),
        ClothingItem(id="t2", name="Cardigan", type="Sweater", insulation=5, tags=["knit"]),
        ClothingItem(id="t3", name="Down Parka", type="Coat", insulation=10, tags=["down", "winter"]),
    ]


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def notifications() -> list[str]:
    """Collects messages passed to the repository's notify callback."""
    return []


@pytest.fixture
def repository(memory_store, notifications) -> WardrobeRepository:
    return WardrobeRepository(memory_store, key="test_wardrobe", notify=notifications.append)


# ============================================
# Gemini client fake
# ============================================


def make_response(text: Any = None, uris: tuple[str, ...] = ()) -> SimpleNamespace:
    """Build an object shaped like a generate_content response."""
    chunks = [SimpleNamespace(web=SimpleNamespace(uri=uri)) for uri in uris]
    candidate = SimpleNamespace(grounding_metadata=SimpleNamespace(grounding_chunks=chunks))
    return SimpleNamespace(text=text, candidates=[candidate])


@pytest.fixture
def gemini_response() -> Callable[..., SimpleNamespace]:
    """Factory for fake generate_content responses."""
    return make_response


class FakeModels:
    """Records generate_content calls and replays queued responses.

    A queued exception is raised; a queued callable is called with the
    call record and its return value used as the response.
    """

    def __init__(self, responses: list[Any]):
        self.responses = list(responses)
        self.calls: list[SimpleNamespace] = []

    def generate_content(self, model, contents, config):
        call = SimpleNamespace(model=model, contents=contents, config=config)
        self.calls.append(call)

        if not self.responses:
            raise AssertionError("Unexpected generate_content call")
        response = self.responses.pop(0)

        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(call)
        return response


class FakeGenaiClient:
    def __init__(self, responses: list[Any]):
        self.models = FakeModels(responses)


@pytest.fixture
def make_gateway() -> Callable[..., GeminiGateway]:
    """Factory for a gateway backed by a FakeGenaiClient."""

    def _make(*responses: Any) -> GeminiGateway:
        return GeminiGateway(FakeGenaiClient(list(responses)), model="gemini-2.5-flash")

    return _make


# ============================================
# Streamlit session state
# ============================================


class MockSessionState:
    """Mock Streamlit session state."""

    def __init__(self):
        self.data = {}

    def __setattr__(self, name, value):
        if name == "data":
            super().__setattr__(name, value)
        else:
            self.data[name] = value

    def __getattr__(self, name):
        if name == "data":
            return super().__getattribute__(name)
        return self.data.get(name)

    def __contains__(self, name):
        return name in self.data

    def __getitem__(self, name):
        return self.data[name]

    def __setitem__(self, name, value):
        self.data[name] = value


@pytest.fixture
def mock_st_session_state(monkeypatch):
    """Replace streamlit.session_state with a plain object."""
    import streamlit  # noqa: F401

    mock_state = MockSessionState()
    monkeypatch.setattr("streamlit.session_state", mock_state, raising=False)

    return mock_state
