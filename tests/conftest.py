"""Shared pytest fixtures and test helpers for stubargs tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from stubargs.domain.parameters import Parameter
from stubargs.infrastructure.signatures import SignatureRegistry

SAMPLE_SOURCE = """\
class Demo {
    void run() {
        widget.resize();
        log(\"text (with parens\");
    }
}
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's STUBARGS_* environment out of the tests."""
    monkeypatch.delenv("STUBARGS_CONFIG", raising=False)


@pytest.fixture
def registry() -> SignatureRegistry:
    """Registry with a single-overload ``resize`` and an ambiguous ``log``."""
    reg = SignatureRegistry()
    reg.register(
        "resize",
        [Parameter(name="width", type_name="int"), Parameter(name="title", type_name="java.lang.String")],
    )
    reg.register("log", [Parameter(name="message", type_name="java.lang.String")])
    reg.register("log", [Parameter(name="value", type_name="long")])
    return reg


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project root with a stubargs.toml and a Java source file.

    CWD is switched to the project so config discovery finds the file.
    """
    (tmp_path / "stubargs.toml").write_text(
        '[signatures]\nresize = ["int width", "java.lang.String title"]\n'
        'log = [["java.lang.String message"], ["long value"]]\n',
        encoding="utf-8",
    )
    (tmp_path / "Demo.java").write_text(SAMPLE_SOURCE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def caret_after(source: str, marker: str) -> int:
    """Offset just past the first occurrence of *marker* in *source*."""
    return source.index(marker) + len(marker)
