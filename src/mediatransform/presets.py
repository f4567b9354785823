from __future__ import annotations

from mediatransform import mime_types
from mediatransform.exceptions import InvalidArgumentError
from mediatransform.hdr import HdrMode
from mediatransform.request import Builder, TransformationRequest

SDR_720P = (
    Builder()
    .set_resolution(720)
    .set_video_mime_type(mime_types.VIDEO_H264)
    .set_audio_mime_type(mime_types.AUDIO_AAC)
    .set_hdr_mode(HdrMode.TONE_MAP_VIA_GPU)
    .build()
)

SDR_1080P = SDR_720P.build_upon().set_resolution(1080).build()

HDR_PASSTHROUGH = (
    Builder()
    .set_video_mime_type(mime_types.VIDEO_H265)
    .set_hdr_mode(HdrMode.KEEP_HDR)
    .build()
)

SLOW_MOTION_FLATTEN = Builder().set_flatten_for_slow_motion(True).build()

PRESETS: dict[str, TransformationRequest] = {
    "sdr-720p": SDR_720P,
    "sdr-1080p": SDR_1080P,
    "hdr-passthrough": HDR_PASSTHROUGH,
    "slow-motion-flatten": SLOW_MOTION_FLATTEN,
}


def list_presets() -> list[str]:
    return sorted(PRESETS)


def get_preset(name: str) -> TransformationRequest:
    key = name.strip().lower().replace("_", "-")
    if key not in PRESETS:
        valid = ", ".join(list_presets())
        raise InvalidArgumentError(f"Unknown preset '{name}'. Use one of: {valid}.")
    return PRESETS[key]
