import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import canvas_paginator
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def tall_image():
    """Portrait-ish rendered document: 714 x 3000, solid black."""
    return Image.new("RGB", (714, 3000), color="black")


@pytest.fixture
def wide_image():
    """Landscape-ish rendered document: 3000 x 1000."""
    return Image.new("RGB", (3000, 1000), color="black")

