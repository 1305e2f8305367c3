from __future__ import annotations

import json
from pathlib import Path

import pytest
from PIL import Image

from flagdata.utils.env import Config


def write_flag(path: Path, colors=((0, 85, 164), (255, 255, 255), (239, 65, 53)), size=(30, 20)) -> Path:
    """Vertical tricolour, like most flags: a handful of solid colours."""
    path.parent.mkdir(parents=True, exist_ok=True)
    w, h = size
    img = Image.new("RGB", size)
    band = w // len(colors)
    for i, c in enumerate(colors):
        img.paste(c, (i * band, 0, w if i == len(colors) - 1 else (i + 1) * band, h))
    img.save(path, format="PNG")
    return path


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(
        source_data_file=tmp_path / "countries.json",
        source_images=tmp_path / "source" / "images",
        country_data_file=tmp_path / "source" / "country-flags.json",
        optimized_images=tmp_path / "source" / "optimized-images",
    )


@pytest.fixture
def write_countries(config: Config):
    def _write(data) -> Path:
        config.source_data_file.write_text(json.dumps(data), encoding="utf-8")
        return config.source_data_file

    return _write
