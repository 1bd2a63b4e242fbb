"""Tests for the command-line entry point."""

import json
from pathlib import Path

import pytest

from apijson.generate_api_json import api_json_filename, main

MODEL_YAML = """\
name: example-package
exports:
  - name: zeta
    kind: function
    returnType: void
  - name: Alpha
    kind: class
    releaseTag: alpha
  - name: beta
    kind: function
    returnType: string
"""


def test_main_writes_document(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify an end-to-end run with an explicit output path."""
    model = tmp_path / "model.yml"
    model.write_text(MODEL_YAML, encoding="utf-8")
    out = tmp_path / "out" / "api.json"

    assert main([str(model), "--output", str(out)]) == 0

    document = json.loads(out.read_text(encoding="utf-8"))
    assert list(document["exports"]) == ["beta", "zeta"]
    assert "Wrote 2 exports of example-package" in capsys.readouterr().out


def test_main_default_output_and_member_order(tmp_path: Path) -> None:
    """Verify the default file name and the --member-order override."""
    model = tmp_path / "model.yml"
    model.write_text(MODEL_YAML, encoding="utf-8")

    assert main([str(model), "--member-order", "declaration"]) == 0

    document = json.loads((tmp_path / "example-package.api.json").read_text("utf-8"))
    assert list(document["exports"]) == ["zeta", "beta"]


def test_main_uses_config_file(tmp_path: Path) -> None:
    """Verify that output settings come from the config file."""
    model = tmp_path / "model.yml"
    model.write_text(MODEL_YAML, encoding="utf-8")
    config = tmp_path / "config.yml"
    config.write_text("member_order: declaration\noutput:\n  indent: 4\n", encoding="utf-8")
    out = tmp_path / "pkg.api.json"

    assert main([str(model), "-o", str(out), "--config", str(config)]) == 0

    text = out.read_text(encoding="utf-8")
    assert '\n    "kind": "package"' in text
    assert list(json.loads(text)["exports"]) == ["zeta", "beta"]


def test_main_reports_bad_model(tmp_path: Path) -> None:
    """Verify that a malformed model exits with a failure code."""
    model = tmp_path / "model.yml"
    model.write_text("name: pkg\nexports:\n  - {name: x, kind: struct}\n", encoding="utf-8")
    out = tmp_path / "pkg.api.json"

    assert main([str(model), "-o", str(out)]) == 1
    assert not out.exists()


def test_main_reports_bad_config(tmp_path: Path) -> None:
    """Verify that an invalid member order in the config fails the run."""
    model = tmp_path / "model.yml"
    model.write_text(MODEL_YAML, encoding="utf-8")
    config = tmp_path / "config.yml"
    config.write_text("member_order: shuffled\n", encoding="utf-8")

    assert main([str(model), "--config", str(config)]) == 1


def test_api_json_filename() -> None:
    """Verify conventional output names, scoped packages included."""
    assert api_json_filename("example-package") == "example-package.api.json"
    assert api_json_filename("@scope/widgets") == "widgets.api.json"


def test_check_accepts_written_document(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that --check validates a document the generator wrote."""
    model = tmp_path / "model.yml"
    model.write_text(MODEL_YAML, encoding="utf-8")
    out = tmp_path / "example-package.api.json"
    assert main([str(model), "-o", str(out)]) == 0
    capsys.readouterr()

    assert main(["--check", str(out)]) == 0
    assert "conforms to the API JSON schema (2 exports)" in capsys.readouterr().out


def test_check_rejects_non_conforming_document(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that --check fails and logs the violations of a bad document."""
    path = tmp_path / "pkg.api.json"
    path.write_text(json.dumps({"kind": "package", "summary": []}), encoding="utf-8")

    assert main(["--check", str(path)]) == 1
    assert "pkg.api.json does not conform" in caplog.text
    assert "'remarks' is a required property" in caplog.text


def test_check_reports_missing_file(tmp_path: Path) -> None:
    """Verify that --check on an absent file exits with a failure code."""
    assert main(["--check", str(tmp_path / "absent.api.json")]) == 1


def test_model_is_required_without_check() -> None:
    """Verify that the parser rejects a run with neither model nor --check."""
    with pytest.raises(SystemExit):
        main([])
