# dwell/graphics/geometry.py
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from dwell.types import Rect

# x, y, u, v per vertex, two triangles per quad
QUAD_VERTEX_COUNT = 6
QUAD_FLOAT_COUNT = 4


def ortho_projection(width: float, height: float) -> np.ndarray:
    """
    Pixel space (origin top-left, y down) to clip space.

    Returned transposed so that `tobytes()` is column-major for GLSL.
    """
    l, r, b, t, n, f = 0.0, float(width), float(height), 0.0, -1.0, 1.0
    rml, tmb, fmn = r - l, t - b, f - n
    return np.array(
        [
            [2.0 / rml, 0.0, 0.0, 0.0],
            [0.0, 2.0 / tmb, 0.0, 0.0],
            [0.0, 0.0, -2.0 / fmn, 0.0],
            [-(r + l) / rml, -(t + b) / tmb, -(f + n) / fmn, 1.0],
        ],
        dtype="f4",
    )


def quad_vertices(
    src: Optional[Rect], dst: Rect, texture_size: Tuple[int, int]
) -> np.ndarray:
    """
    Vertices for a quad covering `dst` that samples `src`.

    Texture rows are uploaded top-first, so v=0 is the top edge of the image.
    """
    tw, th = texture_size
    if tw <= 0 or th <= 0:
        raise ValueError(f"Invalid texture size {tw}x{th}")

    if src is None:
        u0, v0, u1, v1 = 0.0, 0.0, 1.0, 1.0
    else:
        u0, v0 = src.x / tw, src.y / th
        u1, v1 = src.right / tw, src.bottom / th

    x0, y0 = float(dst.x), float(dst.y)
    x1, y1 = float(dst.right), float(dst.bottom)

    return np.array(
        [
            [x0, y0, u0, v0],
            [x1, y0, u1, v0],
            [x0, y1, u0, v1],
            [x1, y0, u1, v0],
            [x1, y1, u1, v1],
            [x0, y1, u0, v1],
        ],
        dtype="f4",
    )
