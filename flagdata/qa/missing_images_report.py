import json
from pathlib import Path
from typing import Dict, List, Tuple

from flagdata.utils.env import Config


def find_missing_images(manifest: Dict[str, dict], images_dir: Path) -> List[Tuple[str, str]]:
    missing = []
    for code, rec in manifest.items():
        image = rec.get("image")
        if not image or not (images_dir / image).is_file():
            missing.append((code, image))
    return missing


def check_indices(manifest: Dict[str, dict]) -> List[str]:
    problems = []
    indices = [rec.get("index") for rec in manifest.values()]
    if indices != list(range(1, len(manifest) + 1)):
        problems.append(f"index sequence is not 1..{len(manifest)} in manifest order")
    for code, rec in manifest.items():
        if rec.get("image") != f"{rec.get('index')}.png":
            problems.append(f"{code}: image {rec.get('image')!r} does not match index {rec.get('index')!r}")
    return problems


if __name__ == "__main__":
    cfg = Config.from_env()
    data = json.loads(cfg.country_data_file.read_text(encoding="utf-8")) if cfg.country_data_file.exists() else {}
    missing = find_missing_images(data, cfg.optimized_images)
    problems = check_indices(data)
    if missing or problems:
        if missing:
            print("Manifest entries without an image:")
            for code, image in missing:
                print(f" - {code}: {image}")
        for p in problems:
            print(f" - {p}")
    else:
        print(f"All good: {len(data)} entries, every image present.")
