"""Tests for the cssvars command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from cssvars import __version__
from cssvars.cli import cli

THEME = ":root {\n  --primary: #000;\n  --gap: 4px;\n}\n"
DARK = ":root { --primary: #000; }\n.dark { --primary: #fff; }\n"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def theme(tmp_path: Path) -> Path:
    path = tmp_path / "theme.css"
    path.write_text(THEME, encoding="utf-8")
    return path


class TestGroup:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"cssvars, version {__version__}" in result.output

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("list", "set", "diff"):
            assert command in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["list", str(tmp_path / "nope.css")])
        assert result.exit_code == 2


class TestList:
    def test_lists_positions_and_values(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["list", str(theme)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "2:13  :root  --primary: #000",
            "3:9  :root  --gap: 4px",
        ]

    def test_filter(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["list", str(theme), "--filter", "GAP"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["3:9  :root  --gap: 4px"]

    def test_json(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["list", str(theme), "--json"])
        assert result.exit_code == 0
        records = json.loads(result.output)
        assert [r["name"] for r in records] == ["--primary", "--gap"]
        assert records[0]["value"] == " #000"

    def test_empty_stylesheet(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "plain.css"
        path.write_text("a { color: red; }\n", encoding="utf-8")
        result = runner.invoke(cli, ["list", str(path)])
        assert result.exit_code == 0
        assert result.output == "No custom properties found.\n"

    def test_non_utf8_stylesheet(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "latin1.css"
        path.write_bytes(b":root { --label: '\xe9'; }\n")
        result = runner.invoke(cli, ["list", str(path)])
        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output

    def test_verbose_flag_accepted(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["-v", "list", str(theme)])
        assert result.exit_code == 0


class TestSet:
    def test_stdout_keeps_padding(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["set", str(theme), "--set", "--primary=#111"])
        assert result.exit_code == 0
        assert result.output == ":root {\n  --primary: #111;\n  --gap: 4px;\n}\n"

    def test_name_without_dashes(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["set", str(theme), "--set", "gap=8px"])
        assert result.exit_code == 0
        assert "  --gap: 8px;\n" in result.output

    def test_raw_value(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["set", str(theme), "--set", "gap=8px", "--raw"])
        assert result.exit_code == 0
        assert "  --gap:8px;\n" in result.output

    def test_output_file(self, runner: CliRunner, theme: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.css"
        result = runner.invoke(
            cli, ["set", str(theme), "--set", "gap=8px", "--set", "primary=red", "-o", str(out)]
        )
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == ":root {\n  --primary: red;\n  --gap: 8px;\n}\n"
        assert "Wrote out.css (2 change(s))" in result.output
        assert theme.read_text(encoding="utf-8") == THEME

    def test_crlf_preserved(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "crlf.css"
        source.write_bytes(b":root {\r\n  --gap: 4px;\r\n}\r\n")
        out = tmp_path / "out.css"
        result = runner.invoke(cli, ["set", str(source), "--set", "gap=8px", "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_bytes() == b":root {\r\n  --gap: 8px;\r\n}\r\n"

    def test_selector_restricts_edit(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "dark.css"
        path.write_text(DARK, encoding="utf-8")
        result = runner.invoke(
            cli, ["set", str(path), "--set", "primary=#222", "--selector", ".dark"]
        )
        assert result.exit_code == 0
        assert result.output == ":root { --primary: #000; }\n.dark { --primary: #222; }\n"

    def test_edits_file(self, runner: CliRunner, theme: Path, tmp_path: Path) -> None:
        edits = tmp_path / "edits.json"
        edits.write_text(json.dumps({"edits": {"primary": "#123"}}), encoding="utf-8")
        result = runner.invoke(cli, ["set", str(theme), "--edits", str(edits)])
        assert result.exit_code == 0
        assert "--primary: #123;" in result.output

    def test_set_overrides_edits_file(
        self, runner: CliRunner, theme: Path, tmp_path: Path
    ) -> None:
        edits = tmp_path / "edits.json"
        edits.write_text('{"--gap": "1px"}', encoding="utf-8")
        result = runner.invoke(
            cli, ["set", str(theme), "--edits", str(edits), "--set", "gap=2px"]
        )
        assert result.exit_code == 0
        assert "--gap: 2px;" in result.output

    def test_invalid_edits_file(self, runner: CliRunner, theme: Path, tmp_path: Path) -> None:
        edits = tmp_path / "edits.json"
        edits.write_text("{broken", encoding="utf-8")
        result = runner.invoke(cli, ["set", str(theme), "--edits", str(edits)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Invalid JSON" in result.output

    def test_non_utf8_edits_file(self, runner: CliRunner, theme: Path, tmp_path: Path) -> None:
        edits = tmp_path / "edits.json"
        edits.write_bytes(b'{"--gap": "\xff"}')
        result = runner.invoke(cli, ["set", str(theme), "--edits", str(edits)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Not valid UTF-8" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_non_utf8_stylesheet(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "latin1.css"
        path.write_bytes(b":root { --label: '\xe9'; }\n")
        result = runner.invoke(cli, ["set", str(path), "--set", "label=x"])
        assert result.exit_code == 1
        assert "Error: Could not open file" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_bad_assignment(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["set", str(theme), "--set", "gap"])
        assert result.exit_code == 2
        assert "expected NAME=VALUE" in result.output

    def test_nothing_to_apply(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["set", str(theme)])
        assert result.exit_code == 2
        assert "Nothing to apply" in result.output

    def test_unknown_name_warns(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["set", str(theme), "--set", "missing=1"])
        assert result.exit_code == 0
        assert "Warning: no declaration named --missing" in result.output


class TestDiff:
    def test_reports_changes(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["diff", str(theme), "--set", "gap=8px"])
        assert result.exit_code == 0
        assert result.output == ":root  --gap: 4px -> 8px\n\nSummary: 1 change(s)\n"

    def test_same_value_is_no_change(self, runner: CliRunner, theme: Path) -> None:
        result = runner.invoke(cli, ["diff", str(theme), "--set", "gap=4px"])
        assert result.exit_code == 0
        assert result.output == "No changes.\n"

    def test_diff_does_not_write(self, runner: CliRunner, theme: Path) -> None:
        runner.invoke(cli, ["diff", str(theme), "--set", "gap=8px"])
        assert theme.read_text(encoding="utf-8") == THEME
