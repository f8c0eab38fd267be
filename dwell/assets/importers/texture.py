# dwell/assets/importers/texture.py
from pathlib import Path

from PIL import Image

from dwell.assets.importers.base import AssetImporter
from dwell.assets.types import TextureData


class TextureImporter(AssetImporter):
    def import_file(self, path: Path) -> TextureData:
        with Image.open(path) as img:
            converted = img.convert("RGBA")

            # Rows stay top-first; the sprite renderer samples with v=0 at
            # the top of the image.
            width, height = converted.size
            data = converted.tobytes()

        return TextureData(
            data=data, width=width, height=height, components=4, path=str(path)
        )
