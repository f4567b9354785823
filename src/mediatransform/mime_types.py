from __future__ import annotations

BASE_TYPE_VIDEO = "video"
BASE_TYPE_AUDIO = "audio"
BASE_TYPE_IMAGE = "image"
BASE_TYPE_TEXT = "text"

VIDEO_H263 = "video/3gpp"
VIDEO_H264 = "video/avc"
VIDEO_H265 = "video/hevc"
VIDEO_VP8 = "video/x-vnd.on2.vp8"
VIDEO_VP9 = "video/x-vnd.on2.vp9"
VIDEO_AV1 = "video/av01"
VIDEO_MP4V = "video/mp4v-es"
VIDEO_DOLBY_VISION = "video/dolby-vision"
VIDEO_MP4 = "video/mp4"

AUDIO_AAC = "audio/mp4a-latm"
AUDIO_AMR_NB = "audio/3gpp"
AUDIO_AMR_WB = "audio/amr-wb"
AUDIO_OPUS = "audio/opus"
AUDIO_VORBIS = "audio/vorbis"
AUDIO_FLAC = "audio/flac"
AUDIO_MPEG = "audio/mpeg"
AUDIO_RAW = "audio/raw"
AUDIO_AC3 = "audio/ac3"
AUDIO_E_AC3 = "audio/eac3"

IMAGE_JPEG = "image/jpeg"
IMAGE_PNG = "image/png"

TEXT_VTT = "text/vtt"
TEXT_SSA = "text/x-ssa"


def get_top_level_type(mime_type: str | None) -> str | None:
    """Return the part of a MIME type before the first '/', if any."""
    if not isinstance(mime_type, str):
        return None
    slash = mime_type.find("/")
    if slash == -1:
        return None
    return mime_type[:slash]


def is_audio(mime_type: str | None) -> bool:
    return get_top_level_type(mime_type) == BASE_TYPE_AUDIO


def is_video(mime_type: str | None) -> bool:
    return get_top_level_type(mime_type) == BASE_TYPE_VIDEO


def is_image(mime_type: str | None) -> bool:
    return get_top_level_type(mime_type) == BASE_TYPE_IMAGE


def is_text(mime_type: str | None) -> bool:
    return get_top_level_type(mime_type) == BASE_TYPE_TEXT
