"""Shared fixtures for the test-suite."""

from __future__ import annotations

import base64
from io import BytesIO

import pytest
from PIL import Image

from trailer_studio.catalog import get_model, get_theme
from trailer_studio.session import SelectionState


def make_png(color: str = "red", size: tuple[int, int] = (8, 8)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


@pytest.fixture
def png_data_url(png_bytes: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def ready_state() -> SelectionState:
    state = SelectionState()
    state.select_model(get_model("single-cold"))
    state.select_theme(get_theme("fresh-aqua"))
    return state
