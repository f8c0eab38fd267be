from dwell.assets.registry import TextureRegistry
from dwell.assets.server import AssetServer
from dwell.assets.types import TextureData

__all__ = [
    "AssetServer",
    "TextureData",
    "TextureRegistry",
]
