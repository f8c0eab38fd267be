from dwell.assets.importers.base import AssetImporter
from dwell.assets.importers.texture import TextureImporter

__all__ = ["AssetImporter", "TextureImporter"]
