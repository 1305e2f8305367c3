# flagdata/qa/validate_schema.py
import json
import sys
from pathlib import Path
from typing import Any, List

from jsonschema import Draft202012Validator

from flagdata.utils.env import Config

# shipped as package data next to this module
SCHEMA_FILE = Path(__file__).resolve().parent / "country-flags.schema.json"


def validate_manifest(data: Any, schema: dict) -> List[str]:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.path)))
    out = []
    for e in errors:
        where = "/".join(map(str, e.path)) or "(root)"
        out.append(f"{where}: {e.message}")
    return out


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 2:
        print("Usage: python -m flagdata.qa.validate_schema [source/country-flags.json] [country-flags.schema.json]")
        return 2

    data_path = Path(args[0]) if args else Config.from_env().country_data_file
    schema_path = Path(args[1]) if len(args) > 1 else SCHEMA_FILE

    data = json.loads(data_path.read_text(encoding="utf-8"))
    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    errors = validate_manifest(data, schema)
    if errors:
        for e in errors[:50]:
            print(f"Schema error at {e}")
        print(f"Total errors: {len(errors)}")
        return 1

    print("Schema validation OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
