"""Pytest configuration and fixtures."""

import os

import numpy as np
import pytest

from regionhist.config import reset_settings
from regionhist.model import NumpyChannelSource


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from REGIONHIST_* environment and cached settings."""
    for key in list(os.environ):
        if key.startswith("REGIONHIST_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def rgb_image():
    """4x3 uint8 image whose channels hold constant 0, 128 and 255."""
    image = np.zeros((3, 4, 3), dtype=np.uint8)
    image[:, :, 1] = 128
    image[:, :, 2] = 255
    return image


@pytest.fixture
def rgb_source(rgb_image):
    """ChannelSource over the rgb_image fixture."""
    return NumpyChannelSource(rgb_image, name="rgb")


@pytest.fixture
def random_image():
    """Reproducible 20x30 three-channel uint8 image."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(20, 30, 3), dtype=np.uint8)
