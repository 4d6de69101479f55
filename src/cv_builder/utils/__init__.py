"""Utility functions and helpers"""

from cv_builder.utils.export import (
    EXPORT_FORMATS,
    export_resume,
    prompt_export_location,
)

__all__ = [
    "EXPORT_FORMATS",
    "export_resume",
    "prompt_export_location",
]
