from __future__ import annotations

import os
from typing import TYPE_CHECKING, Protocol, Union

import pytest
from typer.testing import CliRunner

from dump_env.main import app

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

runner = CliRunner()


@pytest.fixture
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all environment variables, so outputs only contain what the test sets."""
    for key in list(os.environ):
        monkeypatch.delenv(key)


# Template helper
# ----------------------------------------------------------------------------
class TemplateWriter(Protocol):
    def __call__(self, content: Union[str, bytes], *, name: str = ...) -> Path: ...


@pytest.fixture
def write_template(tmp_path: Path) -> TemplateWriter:
    """Returns callable to write a template file in temporary directory."""

    def func(content: Union[str, bytes], *, name: str = ".env.template") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode()

        path.write_bytes(content)
        return path

    return func


# CLI helper
# ----------------------------------------------------------------------------
class Invoker(Protocol):
    def __call__(self, *args: str, env: dict[str, str] | None = None) -> Result: ...


@pytest.fixture
def invoke_cli(clean_environ: None) -> Invoker:  # noqa: ARG001
    """Returns callable to invoke CLI with only the given environment variables."""

    def func(*args: str, env: dict[str, str] | None = None) -> Result:
        # Set by pytest itself for each test phase
        isolated_env: dict[str, str | None] = {"PYTEST_CURRENT_TEST": None}
        return runner.invoke(app, list(args), env=isolated_env | (env or {}))

    return func
