from mediatransform.exceptions import (
    ConfigurationError,
    ErrorCategory,
    InvalidArgumentError,
    MediaTransformError,
)
from mediatransform.hdr import HdrMode
from mediatransform.request import Builder, TransformationRequest

__all__ = [
    "Builder",
    "ConfigurationError",
    "ErrorCategory",
    "HdrMode",
    "InvalidArgumentError",
    "MediaTransformError",
    "TransformationRequest",
]
