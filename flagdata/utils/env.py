import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


# Load .env if present (local runs). Explicit environment variables win.
load_dotenv(dotenv_path=Path(".env"))


DEFAULT_QUALITY = (0.6, 0.8)


def parse_quality(raw: str) -> Tuple[float, float]:
    """
    Parse a quality window written as "min-max" on the 0..1 scale, e.g. "0.6-0.8".
    """
    parts = (raw or "").strip().split("-")
    if len(parts) != 2:
        raise ValueError(f"Invalid quality window: {raw!r} (expected MIN-MAX)")
    try:
        lo, hi = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"Invalid quality window: {raw!r} (expected MIN-MAX)") from None
    if not (0.0 <= lo <= hi <= 1.0):
        raise ValueError(f"Invalid quality window: {raw!r} (need 0 <= MIN <= MAX <= 1)")
    return lo, hi


@dataclass(frozen=True)
class Config:
    source_data_file: Path = Path("countries.json")
    source_images: Path = Path("source/images")
    country_data_file: Path = Path("source/country-flags.json")
    optimized_images: Path = Path("source/optimized-images")
    quality: Tuple[float, float] = DEFAULT_QUALITY

    @classmethod
    def from_env(cls) -> "Config":
        env_quality = os.getenv("FLAGS_QUALITY", "")
        return cls().with_overrides(
            source_data_file=os.getenv("FLAGS_SOURCE_DATA_FILE") or None,
            source_images=os.getenv("FLAGS_SOURCE_IMAGES") or None,
            country_data_file=os.getenv("FLAGS_COUNTRY_DATA_FILE") or None,
            optimized_images=os.getenv("FLAGS_OPTIMIZED_IMAGES") or None,
            quality=parse_quality(env_quality) if env_quality.strip() else None,
        )

    def with_overrides(
        self,
        source_data_file: Optional[str] = None,
        source_images: Optional[str] = None,
        country_data_file: Optional[str] = None,
        optimized_images: Optional[str] = None,
        quality: Optional[Tuple[float, float]] = None,
    ) -> "Config":
        changes = {}
        if source_data_file:
            changes["source_data_file"] = Path(source_data_file)
        if source_images:
            changes["source_images"] = Path(source_images)
        if country_data_file:
            changes["country_data_file"] = Path(country_data_file)
        if optimized_images:
            changes["optimized_images"] = Path(optimized_images)
        if quality is not None:
            changes["quality"] = tuple(quality)
        return replace(self, **changes)
