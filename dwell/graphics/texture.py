# dwell/graphics/texture.py
import moderngl

from dwell.assets.types import TextureData


class GPUTexture:
    """
    Wrapper around moderngl.Texture.
    """

    def __init__(self, ctx: moderngl.Context, data: TextureData):
        self._ctx = ctx
        self.width = data.width
        self.height = data.height

        self.handle = ctx.texture(
            size=(data.width, data.height),
            components=data.components,
            data=data.data,
        )

        # Pixel art: no smoothing, no bleeding across sheet frames
        self.handle.filter = (moderngl.NEAREST, moderngl.NEAREST)
        self.handle.repeat_x = False
        self.handle.repeat_y = False

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def use(self, location: int = 0) -> None:
        self.handle.use(location)

    def release(self) -> None:
        self.handle.release()
