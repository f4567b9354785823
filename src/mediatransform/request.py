from __future__ import annotations

import warnings
from dataclasses import dataclass, fields
from typing import Any, Mapping

from mediatransform import mime_types
from mediatransform.exceptions import InvalidArgumentError
from mediatransform.hdr import HdrMode, hdr_mode_for_hdr_editing, hdr_mode_for_sdr_tone_mapping
from mediatransform.utils.logging import get_logger

log = get_logger(__name__)


def _check_video_mime_type(mime_type: str | None) -> None:
    if mime_type is not None and not mime_types.is_video(mime_type):
        raise InvalidArgumentError(f"Not a video MIME type: {mime_type}")


def _check_audio_mime_type(mime_type: str | None) -> None:
    if mime_type is not None and not mime_types.is_audio(mime_type):
        raise InvalidArgumentError(f"Not an audio MIME type: {mime_type}")


@dataclass(frozen=True)
class TransformationRequest:
    """
    A media transformation request.

    Instances are produced by `Builder.build()` and never change afterwards,
    so they can be shared across threads and used as cache keys. Equality
    and hashing cover all five fields.

    `output_height` of None means the input resolution is kept. A None MIME
    type means the corresponding track keeps its source codec.
    """

    flatten_for_slow_motion: bool = False
    output_height: int | None = None
    audio_mime_type: str | None = None
    video_mime_type: str | None = None
    hdr_mode: HdrMode = HdrMode.KEEP_HDR

    def __post_init__(self) -> None:
        _check_audio_mime_type(self.audio_mime_type)
        _check_video_mime_type(self.video_mime_type)
        if not isinstance(self.hdr_mode, HdrMode):
            raise InvalidArgumentError(f"Not an HDR mode: {self.hdr_mode!r}")

    @classmethod
    def builder(cls) -> "Builder":
        return Builder()

    def build_upon(self) -> "Builder":
        """Return a builder initialized with the values of this request."""
        return Builder.from_request(self)

    @property
    def has_output_height(self) -> bool:
        return self.output_height is not None

    @property
    def requires_tone_mapping(self) -> bool:
        return self.hdr_mode.requires_tone_mapping

    def to_dict(self) -> dict[str, Any]:
        return {
            "flatten_for_slow_motion": self.flatten_for_slow_motion,
            "output_height": self.output_height,
            "audio_mime_type": self.audio_mime_type,
            "video_mime_type": self.video_mime_type,
            "hdr_mode": self.hdr_mode.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransformationRequest":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidArgumentError(f"Unknown request field(s): {', '.join(unknown)}")

        builder = Builder()
        if "flatten_for_slow_motion" in data:
            flatten = data["flatten_for_slow_motion"]
            if not isinstance(flatten, bool):
                raise InvalidArgumentError(
                    f"flatten_for_slow_motion must be a boolean: {flatten!r}"
                )
            builder.set_flatten_for_slow_motion(flatten)
        if "output_height" in data:
            height = data["output_height"]
            # bool is an int subclass
            if height is not None and (isinstance(height, bool) or not isinstance(height, int)):
                raise InvalidArgumentError(f"output_height must be an integer or null: {height!r}")
            builder.set_resolution(height)
        if "audio_mime_type" in data:
            builder.set_audio_mime_type(data["audio_mime_type"])
        if "video_mime_type" in data:
            builder.set_video_mime_type(data["video_mime_type"])
        if "hdr_mode" in data:
            builder.set_hdr_mode(data["hdr_mode"])
        return builder.build()


class Builder:
    """
    Mutable accumulator for TransformationRequest fields.

    Setters validate immediately and return the builder for chaining. A
    rejected value leaves the previous state in place. The builder can keep
    being used after `build()`; built requests hold their own copy.
    """

    def __init__(self) -> None:
        self._flatten_for_slow_motion = False
        self._output_height: int | None = None
        self._audio_mime_type: str | None = None
        self._video_mime_type: str | None = None
        self._hdr_mode = HdrMode.KEEP_HDR

    @classmethod
    def from_request(cls, request: TransformationRequest) -> "Builder":
        builder = cls()
        builder._flatten_for_slow_motion = request.flatten_for_slow_motion
        builder._output_height = request.output_height
        builder._audio_mime_type = request.audio_mime_type
        builder._video_mime_type = request.video_mime_type
        builder._hdr_mode = request.hdr_mode
        return builder

    def set_flatten_for_slow_motion(self, flatten_for_slow_motion: bool) -> "Builder":
        """
        Remove slow motion metadata and apply the described speed changes to
        the samples instead.

        Only applies to MP4 inputs carrying slow motion metadata (e.g. SEF slow
        motion from Samsung devices); other inputs pass through unchanged.
        """
        self._flatten_for_slow_motion = flatten_for_slow_motion
        return self

    def set_resolution(self, output_height: int | None) -> "Builder":
        """
        Set the output display height in pixels; width follows the input
        aspect ratio. None keeps the input resolution.
        """
        self._output_height = output_height
        return self

    def set_video_mime_type(self, video_mime_type: str | None) -> "Builder":
        _check_video_mime_type(video_mime_type)
        self._video_mime_type = video_mime_type
        return self

    def set_audio_mime_type(self, audio_mime_type: str | None) -> "Builder":
        _check_audio_mime_type(audio_mime_type)
        self._audio_mime_type = audio_mime_type
        return self

    def set_hdr_mode(self, hdr_mode: HdrMode | str) -> "Builder":
        self._hdr_mode = HdrMode.parse(hdr_mode)
        return self

    def set_enable_request_sdr_tone_mapping(self, enabled: bool) -> "Builder":
        """Deprecated. Use `set_hdr_mode(HdrMode.TONE_MAP_VIA_DECODER)`."""
        warnings.warn(
            "set_enable_request_sdr_tone_mapping is deprecated; "
            "use set_hdr_mode(HdrMode.TONE_MAP_VIA_DECODER)",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._apply_legacy_mode(hdr_mode_for_sdr_tone_mapping(enabled))

    def experimental_set_enable_hdr_editing(self, enabled: bool) -> "Builder":
        """Deprecated. Use `set_hdr_mode(HdrMode.KEEP_HDR)`."""
        warnings.warn(
            "experimental_set_enable_hdr_editing is deprecated; "
            "use set_hdr_mode(HdrMode.KEEP_HDR)",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._apply_legacy_mode(hdr_mode_for_hdr_editing(enabled))

    def _apply_legacy_mode(self, mode: HdrMode | None) -> "Builder":
        if mode is None:
            return self
        log.debug("Legacy HDR flag mapped to %s", mode.value)
        return self.set_hdr_mode(mode)

    def build(self) -> TransformationRequest:
        request = TransformationRequest(
            flatten_for_slow_motion=self._flatten_for_slow_motion,
            output_height=self._output_height,
            audio_mime_type=self._audio_mime_type,
            video_mime_type=self._video_mime_type,
            hdr_mode=self._hdr_mode,
        )
        log.debug("Built %s", request)
        return request
