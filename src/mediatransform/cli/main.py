from __future__ import annotations

import json
from typing import NoReturn

import typer

from mediatransform.config.settings import Settings, apply_settings, load_settings
from mediatransform.exceptions import MediaTransformError
from mediatransform.hdr import HdrMode
from mediatransform.presets import get_preset, list_presets
from mediatransform.request import Builder, TransformationRequest
from mediatransform.utils.logging import configure_logging, get_logger

app = typer.Typer(add_completion=False)
log = get_logger(__name__)


def _fail(err: MediaTransformError) -> NoReturn:
    typer.echo(f"{err.label()}: {err.message}", err=True)
    raise typer.Exit(code=err.exit_code)


def _start_builder(settings: Settings, preset: str | None) -> Builder:
    if preset is None:
        return apply_settings(Builder(), settings)
    log.debug("Starting from preset %s", preset)
    return get_preset(preset).build_upon()


def _build_request(
    *,
    settings: Settings,
    preset: str | None = None,
    flatten: bool | None = None,
    height: int | None = None,
    audio_mime: str | None = None,
    video_mime: str | None = None,
    hdr_mode: str | None = None,
) -> TransformationRequest:
    builder = _start_builder(settings, preset)

    # CLI overrides on top of env/.env settings or preset
    if flatten is not None:
        builder.set_flatten_for_slow_motion(flatten)
    if height is not None:
        builder.set_resolution(height)
    if audio_mime is not None:
        builder.set_audio_mime_type(audio_mime or None)
    if video_mime is not None:
        builder.set_video_mime_type(video_mime or None)
    if hdr_mode is not None:
        builder.set_hdr_mode(hdr_mode)
    return builder.build()


@app.command()
def config() -> None:
    """Print resolved config."""
    try:
        s = load_settings()
    except MediaTransformError as err:
        _fail(err)
    typer.echo(json.dumps(s.to_public_dict(), indent=2))


@app.command("hdr-modes")
def hdr_modes() -> None:
    """List HDR handling modes."""
    for mode in HdrMode:
        typer.echo(f"{mode.value}\t{mode.description}")


@app.command()
def presets() -> None:
    """List named request presets."""
    for name in list_presets():
        typer.echo(name)


@app.command()
def build(
    preset: str = typer.Option(None, help="Start from a named preset instead of config."),
    flatten: bool = typer.Option(
        None,
        "--flatten/--no-flatten",
        help="Flatten slow motion metadata (overrides config).",
    ),
    height: int = typer.Option(None, help="Output height in pixels (overrides config)."),
    audio_mime: str = typer.Option(
        None,
        help="Output audio MIME type; empty string keeps the source codec.",
    ),
    video_mime: str = typer.Option(
        None,
        help="Output video MIME type; empty string keeps the source codec.",
    ),
    hdr_mode: str = typer.Option(None, help="HDR mode (overrides config)."),
    log_level: str = typer.Option(None, help="Log level (overrides config)."),
) -> None:
    """Build a transformation request and print it as JSON."""
    try:
        settings = load_settings()
        configure_logging(log_level or settings.log_level)
        request = _build_request(
            settings=settings,
            preset=preset,
            flatten=flatten,
            height=height,
            audio_mime=audio_mime,
            video_mime=video_mime,
            hdr_mode=hdr_mode,
        )
    except MediaTransformError as err:
        _fail(err)

    if request.hdr_mode.is_experimental:
        log.warning("HDR mode %s is experimental", request.hdr_mode.value)
    typer.echo(json.dumps(request.to_dict(), indent=2))


def _main() -> None:
    app()


if __name__ == "__main__":
    _main()
