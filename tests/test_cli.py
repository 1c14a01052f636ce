import json

from typer.testing import CliRunner

from rnstyle_cli.main import app

runner = CliRunner()

CODE = "import React from 'react';\n\nconst App = () => <View style={{ flex: 1 }} />;\n"


def test_cli_extract_help():
    result = runner.invoke(app, ["extract", "--help"])
    assert result.exit_code == 0
    assert "Extract the inline style at the cursor" in result.stdout


def test_cli_extract_prints_diff(tmp_path):
    file_path = tmp_path / "App.tsx"
    file_path.write_text(CODE)

    result = runner.invoke(app, ["extract", str(file_path), "--offset", str(CODE.index("flex"))])
    assert result.exit_code == 0
    assert "+const styles = StyleSheet.create({" in result.stdout
    assert "Added style: view" in result.stdout
    # Without --write the file is left alone
    assert file_path.read_text() == CODE


def test_cli_extract_write(tmp_path):
    file_path = tmp_path / "App.jsx"
    file_path.write_text(CODE)

    result = runner.invoke(app, ["extract", str(file_path), "--line", "3", "--column", "35", "--write"])
    assert result.exit_code == 0
    assert "style={styles.view}" in file_path.read_text()


def test_cli_extract_json(tmp_path):
    file_path = tmp_path / "App.tsx"
    file_path.write_text(CODE)

    result = runner.invoke(app, ["extract", str(file_path), "--offset", str(CODE.index("flex")), "--json"])
    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["status"] == "applied"
    assert report["entry_name"] == "view"
    assert [e["new_text"] for e in report["edits"]][1] == "styles.view"
    assert report["edits"][1]["start_position"] == {"line": 2, "character": CODE.splitlines()[2].index("{ flex")}


def test_cli_extract_no_match(tmp_path):
    file_path = tmp_path / "App.tsx"
    file_path.write_text(CODE)

    result = runner.invoke(app, ["extract", str(file_path), "--offset", "0"])
    assert result.exit_code == 0
    assert "Warning: No style object found at cursor position" in result.stdout


def test_cli_rejects_non_react_files(tmp_path):
    file_path = tmp_path / "App.ts"
    file_path.write_text(CODE)

    result = runner.invoke(app, ["extract", str(file_path), "--offset", "0"])
    assert result.exit_code == 1
    assert "only works in React files (.tsx/.jsx)" in result.stdout


def test_cli_requires_cursor(tmp_path):
    file_path = tmp_path / "App.tsx"
    file_path.write_text(CODE)

    result = runner.invoke(app, ["extract", str(file_path)])
    assert result.exit_code == 1
    assert "Provide --offset or --line" in result.stdout


def test_cli_rejects_unknown_line(tmp_path):
    file_path = tmp_path / "App.tsx"
    file_path.write_text(CODE)

    result = runner.invoke(app, ["extract", str(file_path), "--line", "40"])
    assert result.exit_code == 1


def test_cli_uses_config_file(tmp_path):
    file_path = tmp_path / "App.tsx"
    file_path.write_text(CODE)
    config_path = tmp_path / ".rnstyle.toml"
    config_path.write_text('[tool.rnstyle]\nregistry-identifier = "sx"\n')

    result = runner.invoke(
        app,
        ["extract", str(file_path), "--offset", str(CODE.index("flex")), "--config", str(config_path), "--write"],
    )
    assert result.exit_code == 0
    assert "style={sx.view}" in file_path.read_text()


def test_cli_dump_ast(tmp_path):
    file_path = tmp_path / "App.tsx"
    file_path.write_text(CODE)

    result = runner.invoke(app, ["dump-ast", str(file_path)])
    assert result.exit_code == 0
    assert "program" in result.stdout
    assert "jsx_self_closing_element" in result.stdout
