from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image


def save_image(path: Path, size: tuple[int, int], mode: str = "RGBA") -> Path:
    color = 128 if mode == "L" else (40, 120, 200, 255)[: len(mode)]
    Image.new(mode, size, color).save(path, format="PNG")
    return path


@pytest.fixture
def reference(tmp_path: Path) -> Path:
    return save_image(tmp_path / "icon.png", (1024, 1024))
