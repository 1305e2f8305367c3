from __future__ import annotations

import json

from flagdata.generate_country_flags import build_country_record
from flagdata.qa.missing_images_report import check_indices, find_missing_images
from flagdata.qa.validate_schema import SCHEMA_FILE, validate_manifest
from flagdata.qa.validate_schema import main as validate_main


def _schema() -> dict:
    return json.loads(SCHEMA_FILE.read_text(encoding="utf-8"))


def _manifest() -> dict:
    return {
        "US": build_country_record("US", "United States", 1),
        "FR": build_country_record("FR", "France", 2),
    }


def test_generated_records_match_schema() -> None:
    assert validate_manifest(_manifest(), _schema()) == []
    assert validate_manifest({}, _schema()) == []


def test_schema_errors_point_at_the_bad_field() -> None:
    data = _manifest()
    data["US"]["code"] = "US"
    data["FR"]["location"] = [0]
    data["FR"]["extra"] = True

    errors = validate_manifest(data, _schema())

    assert any(e.startswith("US/code:") for e in errors)
    assert any(e.startswith("FR/location:") for e in errors)
    assert any(e.startswith("FR:") and "extra" in e for e in errors)


def test_validate_cli_exit_codes(tmp_path, capsys) -> None:
    good = tmp_path / "good.json"
    good.write_text(json.dumps(_manifest()), encoding="utf-8")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"US": {"name": "United States"}}), encoding="utf-8")

    assert validate_main([str(good), str(SCHEMA_FILE)]) == 0
    assert "Schema validation OK" in capsys.readouterr().out

    assert validate_main([str(bad), str(SCHEMA_FILE)]) == 1
    assert "Total errors:" in capsys.readouterr().out

    assert validate_main(["a", "b", "c"]) == 2


def test_find_missing_images(tmp_path) -> None:
    (tmp_path / "1.png").write_bytes(b"x")
    assert find_missing_images(_manifest(), tmp_path) == [("FR", "2.png")]


def test_check_indices_flags_gaps_and_mismatched_images() -> None:
    assert check_indices(_manifest()) == []

    data = _manifest()
    data["FR"]["index"] = 3
    problems = check_indices(data)

    assert "index sequence is not 1..2 in manifest order" in problems
    assert any(p.startswith("FR: image '2.png'") for p in problems)


def test_schema_ships_inside_the_package() -> None:
    from importlib.resources import files

    packaged = files("flagdata.qa").joinpath("country-flags.schema.json")
    assert json.loads(packaged.read_text(encoding="utf-8")) == _schema()
    assert SCHEMA_FILE.parent.name == "qa"
    assert SCHEMA_FILE.parent.parent.name == "flagdata"


def test_validate_cli_defaults_to_packaged_schema(tmp_path, monkeypatch, capsys) -> None:
    manifest = tmp_path / "country-flags.json"
    manifest.write_text(json.dumps(_manifest()), encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert validate_main([str(manifest)]) == 0
    assert "Schema validation OK" in capsys.readouterr().out
