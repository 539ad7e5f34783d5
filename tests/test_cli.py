"""CLI tests for the extract command."""

import json
import shutil
import sys
import zipfile
from pathlib import Path

import pytest

from wsdl2xsd import cli

WSDL_FIXTURES = Path(__file__).resolve().parent / "fixtures" / "wsdl"


def _run_cli(args, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["wsdl2xsd"] + args)
    return cli.main()


def _project(tmp_path: Path, *names: str) -> Path:
    project = tmp_path / "project"
    wsdl_dir = project / "src" / "wsdl"
    wsdl_dir.mkdir(parents=True)
    for name in names:
        shutil.copy(WSDL_FIXTURES / name, wsdl_dir / name)
    return project


def test_extract_project_defaults(monkeypatch, capsys, tmp_path):
    project = _project(tmp_path, "valid.wsdl")
    _run_cli(["extract", "--project-dir", str(project)], monkeypatch)
    out = capsys.readouterr().out
    assert "[OK] Extraction complete" in out
    assert "Schemas: 1" in out
    assert (project / "src" / "xsd" / "valid.xsd").exists()


def test_extract_logs_progress_to_stderr(monkeypatch, capsys, tmp_path):
    project = _project(tmp_path, "valid.wsdl")
    _run_cli(["extract", "--project-dir", str(project)], monkeypatch)
    err = capsys.readouterr().err
    assert "Reading WSDL:" in err
    assert "Writing schema:" in err


def test_extract_quiet(monkeypatch, capsys, tmp_path):
    project = _project(tmp_path, "valid.wsdl")
    _run_cli(["extract", "--quiet", "--project-dir", str(project)], monkeypatch)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Writing schema:" not in captured.err


def test_extract_explicit_files_and_dest(monkeypatch, capsys, tmp_path):
    project = _project(tmp_path, "valid.wsdl", "no-schema.wsdl")
    dest = tmp_path / "generated"
    _run_cli([
        "extract",
        "--project-dir", str(project),
        "--wsdl-file", "valid.wsdl",
        "--dest-dir", str(dest),
    ], monkeypatch)
    assert (dest / "valid.xsd").exists()
    assert not (dest / "no-schema.xsd").exists()


def test_extract_schema_count_error_exits_1(monkeypatch, capsys, tmp_path):
    project = _project(tmp_path, "multiple-schemas.wsdl")
    with pytest.raises(SystemExit) as excinfo:
        _run_cli(["extract", "--project-dir", str(project)], monkeypatch)
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "Error: Expected a single schema within the given wsdl." in err


def test_extract_schema_count_error_names_wsdl_when_quiet(monkeypatch, capsys, tmp_path):
    project = _project(tmp_path, "multiple-schemas.wsdl")
    with pytest.raises(SystemExit) as excinfo:
        _run_cli(["extract", "--quiet", "--project-dir", str(project)], monkeypatch)
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "Expected a single schema within the given wsdl." in err
    assert "multiple-schemas.wsdl" in err


def test_extract_missing_directory_exits_1(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        _run_cli(["extract", "--project-dir", str(tmp_path)], monkeypatch)
    assert excinfo.value.code == 1
    assert "directory does not exist" in capsys.readouterr().err


def test_extract_from_dependency(monkeypatch, capsys, tmp_path):
    jar = tmp_path / "lib" / "contracts-1.0.jar"
    jar.parent.mkdir()
    with zipfile.ZipFile(jar, "w") as archive:
        archive.write(WSDL_FIXTURES / "valid.wsdl", "wsdl/valid.wsdl")
    manifest = tmp_path / "artifacts.json"
    manifest.write_text(json.dumps({
        "artifacts": [{"groupId": "org.example", "artifactId": "contracts", "file": "lib/contracts-1.0.jar"}]
    }), encoding="utf-8")
    dest = tmp_path / "xsd"

    _run_cli([
        "extract",
        "--dependency", "org.example:contracts",
        "--artifacts", str(manifest),
        "--wsdl-file", "wsdl/valid.wsdl",
        "--dest-dir", str(dest),
    ], monkeypatch)

    assert "Schemas: 1" in capsys.readouterr().out
    assert (dest / "valid.xsd").exists()


def test_extract_invalid_dependency_exits_1(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        _run_cli([
            "extract",
            "--dependency", "not-a-coordinate",
            "--wsdl-file", "valid.wsdl",
            "--dest-dir", str(tmp_path / "xsd"),
        ], monkeypatch)
    assert excinfo.value.code == 1
    assert "Error: WSDL dependency invalid: not-a-coordinate" in capsys.readouterr().err


def test_extract_with_config_file_and_flag_override(monkeypatch, capsys, tmp_path):
    project = _project(tmp_path, "valid.wsdl")
    config_path = project / "wsdl2xsd.json"
    config_path.write_text(json.dumps({
        "wsdlDirectory": "src/wsdl",
        "sourceDestDir": "from-config",
    }), encoding="utf-8")
    dest = tmp_path / "from-flag"

    _run_cli(["extract", "--config", str(config_path), "--dest-dir", str(dest)], monkeypatch)

    assert (dest / "valid.xsd").exists()
    assert not (project / "from-config").exists()


def test_log_file(monkeypatch, capsys, tmp_path):
    project = _project(tmp_path, "valid.wsdl")
    log_file = tmp_path / "run.log"
    _run_cli(["extract", "--project-dir", str(project), "--log-file", str(log_file)], monkeypatch)
    contents = log_file.read_text(encoding="utf-8")
    assert "INFO" in contents
    assert "Writing schema:" in contents


def test_no_command_prints_help(monkeypatch, capsys):
    with pytest.raises(SystemExit) as excinfo:
        _run_cli([], monkeypatch)
    assert excinfo.value.code == 1
    assert "usage:" in capsys.readouterr().out


def test_version(monkeypatch, capsys):
    with pytest.raises(SystemExit) as excinfo:
        _run_cli(["--version"], monkeypatch)
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("wsdl2xsd ")
