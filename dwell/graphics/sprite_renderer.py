# dwell/graphics/sprite_renderer.py
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import moderngl

from dwell.assets.registry import TextureRegistry
from dwell.graphics.frame import SpriteDraw
from dwell.graphics.geometry import (
    QUAD_FLOAT_COUNT,
    QUAD_VERTEX_COUNT,
    ortho_projection,
    quad_vertices,
)
from dwell.graphics.texture import GPUTexture
from dwell.types import Color

SHADER_DIR = Path(__file__).parent / "shaders"


def load_sprite_program(ctx: moderngl.Context) -> moderngl.Program:
    vert = SHADER_DIR / "sprite.vert"
    frag = SHADER_DIR / "sprite.frag"
    return ctx.program(
        vertex_shader=vert.read_text(), fragment_shader=frag.read_text()
    )


class SpriteRenderer:
    """
    Draws textured quads in screen pixel coordinates, one quad per draw.
    """

    def __init__(
        self,
        ctx: moderngl.Context,
        textures: TextureRegistry[GPUTexture],
        width: int,
        height: int,
        clear_color: Color = (0.0, 0.0, 0.0, 1.0),
        present: Optional[Callable[[], None]] = None,
    ):
        self.ctx = ctx
        self.textures = textures
        self.width = width
        self.height = height
        self.clear_color = clear_color
        self._present = present

        self._program: moderngl.Program | None = load_sprite_program(ctx)
        self._program["u_texture"].value = 0
        self._program["u_proj"].write(ortho_projection(width, height).tobytes())

        self._vbo: moderngl.Buffer | None = ctx.buffer(
            reserve=QUAD_VERTEX_COUNT * QUAD_FLOAT_COUNT * 4, dynamic=True
        )
        self._vao: moderngl.VertexArray | None = ctx.vertex_array(
            self._program, [(self._vbo, "2f 2f", "in_pos", "in_uv")]
        )

    def upload(self, data) -> GPUTexture:
        """Create a GPU texture from decoded image data."""
        return GPUTexture(self.ctx, data)

    def clear(self) -> None:
        self.ctx.screen.use()
        self.ctx.viewport = (0, 0, self.width, self.height)
        self.ctx.clear(*self.clear_color)

    def draw(self, item: SpriteDraw) -> None:
        if self._vao is None or self._vbo is None:
            raise RuntimeError("SpriteRenderer used after release()")

        texture = self.textures.get(item.texture_id)
        verts = quad_vertices(item.src, item.dst, texture.size)

        texture.use(location=0)
        self._vbo.write(verts.tobytes())
        self._vao.render(moderngl.TRIANGLES, vertices=QUAD_VERTEX_COUNT)

    def present(self) -> None:
        if self._present is not None:
            self._present()

    def release(self) -> None:
        if self._vao:
            self._vao.release()
            self._vao = None
        if self._vbo:
            self._vbo.release()
            self._vbo = None
        if self._program:
            self._program.release()
            self._program = None
