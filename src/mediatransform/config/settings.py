from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediatransform.exceptions import ConfigurationError, InvalidArgumentError
from mediatransform.request import Builder, TransformationRequest


class Settings(BaseSettings):
    """
    Default transformation request values and runtime options.

    All settings are loaded from environment variables with the
    `MEDIATRANSFORM_` prefix and optional `.env` support. Values are kept
    as plain strings/ints here; `request_from_settings` runs them through
    the request builder so validation lives in one place.
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIATRANSFORM_",
        env_file=".env",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Request defaults
    # ------------------------------------------------------------------
    flatten_for_slow_motion: bool = Field(
        default=False,
        description="Flatten slow motion metadata into the samples.",
    )
    output_height: int | None = Field(
        default=None,
        description="Output display height in pixels (unset keeps input resolution).",
    )
    audio_mime_type: str | None = Field(
        default=None,
        description="Output audio MIME type, e.g. audio/mp4a-latm (unset keeps source codec).",
    )
    video_mime_type: str | None = Field(
        default=None,
        description="Output video MIME type, e.g. video/avc (unset keeps source codec).",
    )
    hdr_mode: str = Field(
        default="keep_hdr",
        description=(
            "HDR handling: keep_hdr, tone_map_via_decoder, tone_map_via_gpu, "
            "force_interpret_as_sdr."
        ),
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )

    def to_public_dict(self) -> dict:
        """
        Return a dictionary of settings suitable for logging or CLI display.
        """
        return {
            "flatten_for_slow_motion": self.flatten_for_slow_motion,
            "output_height": self.output_height,
            "audio_mime_type": self.audio_mime_type,
            "video_mime_type": self.video_mime_type,
            "hdr_mode": self.hdr_mode,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as err:
        raise ConfigurationError(f"Invalid settings: {err}") from err


def apply_settings(builder: Builder, settings: Settings) -> Builder:
    try:
        return (
            builder.set_flatten_for_slow_motion(settings.flatten_for_slow_motion)
            .set_resolution(settings.output_height)
            .set_audio_mime_type(settings.audio_mime_type or None)
            .set_video_mime_type(settings.video_mime_type or None)
            .set_hdr_mode(settings.hdr_mode)
        )
    except InvalidArgumentError as err:
        raise ConfigurationError(f"Invalid request settings: {err.message}") from err


def request_from_settings(settings: Settings | None = None) -> TransformationRequest:
    return apply_settings(Builder(), settings or load_settings()).build()
