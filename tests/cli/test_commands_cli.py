"""
Tests for the extcommands CLI
"""
import json
import tempfile
from pathlib import Path

from typer.testing import CliRunner

from extcommands.cli import app

runner = CliRunner()


def _extension(root: Path, commands) -> Path:
    ext_dir = root / "acme"
    ext_dir.mkdir()
    manifest = {"publisher": "acme", "name": "tools", "contributes": {"commands": commands}}
    (ext_dir / "package.json").write_text(json.dumps(manifest))
    return ext_dir


def test_validate_json_output():
    with tempfile.TemporaryDirectory() as tmpdir:
        ext_dir = _extension(Path(tmpdir), [{"command": "ext.go", "title": "Go", "icon": "icons/go.png"}])

        result = runner.invoke(app, ["validate", tmpdir, "--json"])

    assert result.exit_code == 0
    commands = json.loads(result.stdout)
    assert commands == [
        {"command": "ext.go", "title": "Go", "icon": str(ext_dir.resolve() / "icons" / "go.png")}
    ]


def test_validate_reports_errors():
    with tempfile.TemporaryDirectory() as tmpdir:
        _extension(Path(tmpdir), [{"command": "ext.go", "title": "Go"}, {"title": "missing id"}])

        result = runner.invoke(app, ["validate", tmpdir])

    assert result.exit_code == 1
    assert "acme.tools" in result.stdout
    assert "command" in result.stdout


def test_validate_without_directories():
    with tempfile.TemporaryDirectory() as tmpdir:
        settings = Path(tmpdir) / "settings.json"
        settings.write_text("{}")

        result = runner.invoke(app, ["validate", "--config", str(settings)])

    assert result.exit_code == 2


def test_schema_command():
    result = runner.invoke(app, ["schema"])

    assert result.exit_code == 0
    assert "oneOf" in json.loads(result.stdout)


def test_validate_reports_extensions_sharing_an_id():
    with tempfile.TemporaryDirectory() as first, tempfile.TemporaryDirectory() as second:
        for root in (first, second):
            ext_dir = Path(root) / "tools"
            ext_dir.mkdir()
            manifest = {"contributes": {"commands": [{"title": "missing id"}]}}
            (ext_dir / "package.json").write_text(json.dumps(manifest))

        result = runner.invoke(app, ["validate", first, second])

    assert result.exit_code == 1
    assert result.stdout.count("✗") == 2


def test_list_skips_invalid_commands():
    with tempfile.TemporaryDirectory() as tmpdir:
        _extension(Path(tmpdir), [{"command": "ext.go", "title": "Go"}, {"title": "missing id"}])

        result = runner.invoke(app, ["list", tmpdir, "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"command": "ext.go", "title": "Go"}]


def test_list_table_output():
    with tempfile.TemporaryDirectory() as tmpdir:
        _extension(Path(tmpdir), [{"command": "ext.go", "title": "Go", "where": "editor/primary"}])

        result = runner.invoke(app, ["list", tmpdir])

    assert result.exit_code == 0
    assert "ext.go" in result.stdout
    assert "Commands (1)" in result.stdout
