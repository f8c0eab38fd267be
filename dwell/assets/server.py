# dwell/assets/server.py
from pathlib import Path
from typing import Callable, Dict, Generic, TypeVar

from dwell.assets.importers.base import AssetImporter
from dwell.assets.importers.texture import TextureImporter
from dwell.assets.registry import TextureRegistry
from dwell.assets.types import TextureData
from dwell.types import TextureId

T = TypeVar("T")

Uploader = Callable[[TextureData], T]


class AssetServer(Generic[T]):
    """
    Loads textures from disk at startup and registers them.

    Loading is blocking. Any failure propagates to the caller: a missing or
    undecodable asset is not something the demo can run without.
    """

    def __init__(
        self,
        asset_root: Path,
        registry: TextureRegistry[T],
        upload: Uploader,
    ) -> None:
        self.root = asset_root
        self.registry = registry
        self._upload = upload

        self._ids: Dict[str, TextureId] = {}  # Path -> Id

        texture_importer = TextureImporter()
        self._importers: Dict[str, AssetImporter] = {
            ".png": texture_importer,
            ".jpg": texture_importer,
            ".jpeg": texture_importer,
        }

    def load(self, path: str) -> TextureId:
        """Decode, upload and register `path` (relative to the asset root)."""
        if path in self._ids:
            return self._ids[path]

        full_path = self.root / path
        ext = full_path.suffix.lower()
        importer = self._importers.get(ext)
        if not importer:
            raise ValueError(f"No importer for '{ext}' ({full_path})")
        if not full_path.is_file():
            raise FileNotFoundError(f"Asset not found: {full_path}")

        data: TextureData = importer.import_file(full_path)
        texture_id = self.registry.register(self._upload(data))
        self._ids[path] = texture_id

        print(
            f"[assets] loaded {path} ({data.width}x{data.height}) "
            f"as texture {texture_id}"
        )
        return texture_id
