"""Tests for the insert command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from stubargs.cli import cli
from tests.conftest import SAMPLE_SOURCE, caret_after


def _offset(marker: str) -> str:
    return str(caret_after(SAMPLE_SOURCE, marker))


class TestInsertCommand:
    def test_writes_file(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "insert", "Demo.java", "--offset", _offset("resize(")]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"]["inserted"] == '1, "testTitle"'
        assert data["data"]["caret"] == data["data"]["offset"] + 1
        text = (project / "Demo.java").read_text(encoding="utf-8")
        assert 'widget.resize(1, "testTitle");' in text

    def test_dry_run_leaves_file(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "insert", "Demo.java", "--offset", _offset("resize("), "--dry-run"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == '1, "testTitle"'
        assert (project / "Demo.java").read_text(encoding="utf-8") == SAMPLE_SOURCE

    def test_check_available(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "insert", "Demo.java", "--offset", _offset("resize("), "--check"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "yes"

    def test_check_unavailable_for_overloads(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "insert", "Demo.java", "--offset", _offset("log("), "--check"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["available"] is False
        assert data["data"]["call"] == "log"

    def test_unresolved_fails(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "insert", "Demo.java", "--offset", _offset("log(")]
        )
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "UNRESOLVED"
        assert (project / "Demo.java").read_text(encoding="utf-8") == SAMPLE_SOURCE

    def test_no_call_fails(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "insert", "Demo.java", "--offset", "0"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "NO_CALL"

    def test_declaration_left_untouched(self, cli_runner: CliRunner, project: Path) -> None:
        source = "class Widget {\n    public void resize(int width, String title) {}\n}\n"
        (project / "Widget.java").write_text(source, encoding="utf-8")
        result = cli_runner.invoke(
            cli,
            ["--json", "insert", "Widget.java", "--offset", str(caret_after(source, "resize("))],
        )
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "NO_CALL"
        assert (project / "Widget.java").read_text(encoding="utf-8") == source

    def test_bad_offset(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "insert", "Demo.java", "--offset", "99999"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "BAD_OFFSET"

    def test_extra_signatures_file(self, cli_runner: CliRunner, project: Path) -> None:
        source = "helper.save();\n"
        (project / "Other.java").write_text(source, encoding="utf-8")
        (project / "sigs.toml").write_text(
            '[signatures]\n"helper.save" = ["java.math.BigDecimal total", "char c"]\n',
            encoding="utf-8",
        )
        result = cli_runner.invoke(
            cli,
            [
                "insert",
                "Other.java",
                "--offset",
                str(caret_after(source, "save(")),
                "--signatures",
                "sigs.toml",
            ],
        )
        assert result.exit_code == 0, result.output
        assert (project / "Other.java").read_text(encoding="utf-8") == (
            "helper.save(BigDecimal.ONE, 'c');\n"
        )

    def test_malformed_signatures_file(self, cli_runner: CliRunner, project: Path) -> None:
        (project / "bad.toml").write_text('[signatures]\nf = "int a"\n', encoding="utf-8")
        result = cli_runner.invoke(
            cli,
            ["insert", "Demo.java", "--offset", _offset("resize("), "--signatures", "bad.toml"],
        )
        assert result.exit_code == 1
        assert "must be a list" in result.stderr

    def test_missing_file(self, cli_runner: CliRunner, project: Path) -> None:
        result = cli_runner.invoke(cli, ["insert", "Nope.java", "--offset", "0"])
        assert result.exit_code == 2
