# dwell/assets/types.py
from dataclasses import dataclass


@dataclass(frozen=True)
class TextureData:
    """Raw texture data and metadata."""

    data: bytes
    width: int
    height: int
    components: int  # always 4 (RGBA) for imported images
    path: str = ""  # For debugging / error reporting.
