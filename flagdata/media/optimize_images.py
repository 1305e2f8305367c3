# flagdata/media/optimize_images.py
import math
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageChops, ImageStat

from flagdata.utils import console
from flagdata.utils.env import Config

# palette sizes tried, smallest first
PALETTE_SIZES = (8, 16, 32, 64, 128, 256)

# PSNR (dB) mapped onto the 0..1 quality scale
PSNR_FLOOR = 20.0
PSNR_CEIL = 50.0


class QualityTooLowError(ValueError):
    """Even the largest palette cannot reach the minimum quality."""


def _has_alpha(img: Image.Image) -> bool:
    # tRNS transparency shows up in info for P, RGB and L images
    return img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info


def image_quality(original: Image.Image, candidate: Image.Image) -> float:
    """
    0..1 similarity between two same-sized images, derived from PSNR.
    """
    cand = candidate.convert(original.mode)
    rms = ImageStat.Stat(ImageChops.difference(original, cand)).rms
    mse = sum(r * r for r in rms) / len(rms)
    if mse == 0:
        return 1.0
    psnr = 10 * math.log10(255.0 ** 2 / mse)
    return min(1.0, max(0.0, (psnr - PSNR_FLOOR) / (PSNR_CEIL - PSNR_FLOOR)))


def quantize_png(path: Path, quality: Tuple[float, float]) -> int:
    """
    Rewrite one PNG in place with the smallest palette whose quality reaches
    the upper bound, falling back to 256 colors if that still meets the lower
    bound. Returns the palette size used.
    """
    lo, hi = quality
    with Image.open(path) as im:
        base = im.convert("RGBA") if _has_alpha(im) else im.convert("RGB")
    # alpha now lives in the pixels; a leftover tRNS value breaks the P save
    base.info.pop("transparency", None)
    # only fast octree handles RGBA
    method = Image.Quantize.FASTOCTREE if base.mode == "RGBA" else Image.Quantize.MEDIANCUT

    chosen, chosen_q, colors = None, 0.0, 0
    for n in PALETTE_SIZES:
        cand = base.quantize(colors=n, method=method)
        q = image_quality(base, cand)
        chosen, chosen_q, colors = cand, q, n
        if q >= hi:
            break
    if chosen_q < lo:
        raise QualityTooLowError(
            f"{path.name}: quality {chosen_q:.2f} is below the minimum {lo:.2f}"
        )
    chosen.save(path, format="PNG", optimize=True)
    return colors


def optimize_images(config: Config) -> int:
    """
    Lossy-compress every *.png in the output image directory, in place.
    The batch stops at the first failure; the error is reported, not raised.
    """
    root = config.optimized_images
    if not root.exists():
        return 0
    done = 0
    try:
        for p in sorted(root.glob("*.png")):
            if not p.is_file():
                continue
            quantize_png(p, config.quality)
            done += 1
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        # PIL.UnidentifiedImageError is an OSError
        console.error(f"  ! image optimization failed: {e}")
    return done
