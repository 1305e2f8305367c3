# flagdata/media/copy_images.py
import shutil
from pathlib import Path

from flagdata.utils import console
from flagdata.utils.env import Config


def source_image_path(config: Config, country_code: str) -> Path:
    return config.source_images / f"{country_code.lower()}.png"


def target_image_path(config: Config, index: int) -> Path:
    return config.optimized_images / f"{index}.png"


def copy_image(config: Config, country_code: str, index: int) -> bool:
    """
    Copy <source_images>/<code>.png to <optimized_images>/<index>.png.
    A missing or unreadable source is reported and skipped, never raised.
    """
    src = source_image_path(config, country_code)
    dst = target_image_path(config, index)
    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dst)
    except OSError as e:
        console.error(f"  ! failed to copy {src} -> {dst}: {e}")
        return False
    return True
