from __future__ import annotations

import inspect

import pytest
import typer.testing


@pytest.fixture
def runner() -> typer.testing.CliRunner:
    # click >= 8.2 always separates stderr and dropped the mix_stderr flag.
    if "mix_stderr" in inspect.signature(typer.testing.CliRunner).parameters:
        return typer.testing.CliRunner(mix_stderr=False)
    return typer.testing.CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path) -> None:
    for key in (
        "FLATTEN_FOR_SLOW_MOTION",
        "OUTPUT_HEIGHT",
        "AUDIO_MIME_TYPE",
        "VIDEO_MIME_TYPE",
        "HDR_MODE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(f"MEDIATRANSFORM_{key}", raising=False)
    # Keep a developer's .env out of the tests.
    monkeypatch.chdir(tmp_path)
