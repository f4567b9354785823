"""HDR handling strategies a transcoding pipeline can be asked to apply.

SDR input is unaffected by any of these modes.
"""

from __future__ import annotations

from enum import Enum

from mediatransform.exceptions import InvalidArgumentError


class HdrMode(str, Enum):
    """Closed set of strategies for HDR source video."""

    KEEP_HDR = "keep_hdr"
    TONE_MAP_VIA_DECODER = "tone_map_via_decoder"
    TONE_MAP_VIA_GPU = "tone_map_via_gpu"
    FORCE_INTERPRET_AS_SDR = "force_interpret_as_sdr"

    @property
    def produces_hdr_output(self) -> bool:
        return self is HdrMode.KEEP_HDR

    @property
    def requires_tone_mapping(self) -> bool:
        return self in (HdrMode.TONE_MAP_VIA_DECODER, HdrMode.TONE_MAP_VIA_GPU)

    @property
    def is_experimental(self) -> bool:
        return self is HdrMode.FORCE_INTERPRET_AS_SDR

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: "HdrMode | str") -> "HdrMode":
        """
        Resolve a member from itself, its value or its name.

        Anything outside the four members raises InvalidArgumentError;
        integers are never accepted.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            for mode in cls:
                if key == mode.value:
                    return mode
        valid = ", ".join(m.value for m in cls)
        raise InvalidArgumentError(f"Not an HDR mode: {value!r}. Use one of: {valid}.")


_DESCRIPTIONS: dict[HdrMode, str] = {
    HdrMode.KEEP_HDR: (
        "Process HDR input as HDR to produce HDR output; "
        "a pipeline may fall back to decoder tone mapping when unsupported."
    ),
    HdrMode.TONE_MAP_VIA_DECODER: (
        "Tone map HDR to SDR with the decoder's tone mapper; fails when unsupported."
    ),
    HdrMode.TONE_MAP_VIA_GPU: (
        "Tone map HDR to SDR with a GPU shader; wider support, small visual differences."
    ),
    HdrMode.FORCE_INTERPRET_AS_SDR: (
        "Experimental: ignore HDR transfer functions and metadata, "
        "likely giving a washed out look."
    ),
}


def hdr_mode_for_sdr_tone_mapping(enabled: bool) -> HdrMode | None:
    """Legacy 'request SDR tone mapping' flag mapped onto an HdrMode (None = no change)."""
    return HdrMode.TONE_MAP_VIA_DECODER if enabled else None


def hdr_mode_for_hdr_editing(enabled: bool) -> HdrMode | None:
    """Legacy 'enable HDR editing' flag mapped onto an HdrMode (None = no change)."""
    return HdrMode.KEEP_HDR if enabled else None
