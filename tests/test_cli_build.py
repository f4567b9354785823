from __future__ import annotations

import json
import logging

from mediatransform.cli.main import app


def test_build_defaults(runner) -> None:
    result = runner.invoke(app, ["build"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "flatten_for_slow_motion": False,
        "output_height": None,
        "audio_mime_type": None,
        "video_mime_type": None,
        "hdr_mode": "keep_hdr",
    }


def test_build_with_overrides(runner) -> None:
    result = runner.invoke(
        app,
        [
            "build",
            "--flatten",
            "--height",
            "1080",
            "--video-mime",
            "video/hevc",
            "--hdr-mode",
            "tone-map-via-decoder",
        ],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["flatten_for_slow_motion"] is True
    assert data["output_height"] == 1080
    assert data["video_mime_type"] == "video/hevc"
    assert data["hdr_mode"] == "tone_map_via_decoder"


def test_build_from_preset_with_cleared_audio(runner) -> None:
    result = runner.invoke(app, ["build", "--preset", "sdr-720p", "--audio-mime", ""])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["output_height"] == 720
    assert data["audio_mime_type"] is None
    assert data["video_mime_type"] == "video/avc"


def test_build_reports_invalid_argument(runner) -> None:
    result = runner.invoke(app, ["build", "--video-mime", "audio/mp4a-latm"])
    assert result.exit_code == 2
    assert "Invalid argument: Not a video MIME type: audio/mp4a-latm" in result.stderr


def test_build_reports_config_error(runner, monkeypatch) -> None:
    monkeypatch.setenv("MEDIATRANSFORM_VIDEO_MIME_TYPE", "text/vtt")
    result = runner.invoke(app, ["build"])
    assert result.exit_code == 3
    assert "Configuration error: Invalid request settings" in result.stderr


def test_hdr_modes_and_presets_listing(runner) -> None:
    result = runner.invoke(app, ["hdr-modes"])
    assert result.exit_code == 0
    assert [line.split("\t")[0] for line in result.stdout.splitlines()] == [
        "keep_hdr",
        "tone_map_via_decoder",
        "tone_map_via_gpu",
        "force_interpret_as_sdr",
    ]

    result = runner.invoke(app, ["presets"])
    assert result.exit_code == 0
    assert "sdr-1080p" in result.stdout.splitlines()


def test_config_prints_resolved_settings(runner, monkeypatch) -> None:
    monkeypatch.setenv("MEDIATRANSFORM_OUTPUT_HEIGHT", "480")
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["output_height"] == 480


def test_build_reports_badly_typed_env_setting(runner, monkeypatch) -> None:
    monkeypatch.setenv("MEDIATRANSFORM_OUTPUT_HEIGHT", "tall")
    result = runner.invoke(app, ["build"])
    assert result.exit_code == 3
    assert "Configuration error: Invalid settings" in result.stderr

    result = runner.invoke(app, ["config"])
    assert result.exit_code == 3
    assert "Configuration error: Invalid settings" in result.stderr


def test_build_warns_for_experimental_hdr_mode(runner, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="mediatransform.cli.main"):
        result = runner.invoke(app, ["build", "--hdr-mode", "force_interpret_as_sdr"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["hdr_mode"] == "force_interpret_as_sdr"
    assert any(
        r.levelno == logging.WARNING and "force_interpret_as_sdr is experimental" in r.getMessage()
        for r in caplog.records
    )
