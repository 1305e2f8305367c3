#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Build the country-flags dataset.

It:
- Reads all countries (code -> name) from the source data file
- Copies each flag image to the output folder, renamed to its index number
- Writes the country-flags JSON manifest keyed by country code
- Optimizes (lossy PNG quantization) every copied image

Run:
  python -m flagdata.generate_country_flags --data countries.json --images source/images
"""

import argparse
import json
from typing import Any, Dict, Optional, Sequence

from flagdata.ingest.countries import load_country_data
from flagdata.media.copy_images import copy_image
from flagdata.media.optimize_images import optimize_images
from flagdata.utils import console
from flagdata.utils.env import Config, parse_quality

# real coordinates are not sourced
PLACEHOLDER_LOCATION = (0, 0)


def build_country_record(country_code: str, country_name: str, index: int) -> Dict[str, Any]:
    return {
        "name": country_name,
        "code": country_code.lower(),
        "location": list(PLACEHOLDER_LOCATION),
        "index": index,
        "image": f"{index}.png",
    }


def write_manifest(config: Config, manifest: Dict[str, Dict[str, Any]]):
    out = config.country_data_file
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, ensure_ascii=False, indent=2)
        f.write("\n")


def generate_country_data_json_file(config: Config) -> Dict[str, Dict[str, Any]]:
    country_data = load_country_data(config)
    manifest: Dict[str, Dict[str, Any]] = {}
    counter = 1
    if country_data:
        for code, name in country_data.items():
            manifest[code] = build_country_record(code, name, counter)
            console.info(f"- {code} -> {counter}.png")
            copy_image(config, code, counter)
            counter += 1

    write_manifest(config, manifest)
    console.info(f"Wrote {len(manifest)} countries -> {config.country_data_file}")
    optimize_images(config)
    console.done("DONE")
    return manifest


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Build the country-flags JSON manifest and optimized flag images.")
    ap.add_argument("--data", help="source JSON file of country code -> name")
    ap.add_argument("--images", help="folder of <code>.png source flags")
    ap.add_argument("--out", help="manifest JSON file to write")
    ap.add_argument("--out-images", help="folder for <index>.png output flags")
    ap.add_argument("--quality", help="lossy quality window MIN-MAX on 0..1 (default 0.6-0.8)")
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None):
    args = parse_args(argv)
    config = Config.from_env().with_overrides(
        source_data_file=args.data,
        source_images=args.images,
        country_data_file=args.out,
        optimized_images=args.out_images,
        quality=parse_quality(args.quality) if args.quality else None,
    )
    generate_country_data_json_file(config)


if __name__ == "__main__":
    main()
