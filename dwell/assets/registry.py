# dwell/assets/registry.py
from typing import Any, Generic, Iterator, List, TypeVar

from dwell.types import TextureId

T = TypeVar("T")


class TextureRegistry(Generic[T]):
    """
    Owns every loaded texture. Everything else refers to a texture by
    the integer id returned from `register`.

    Append-only: ids stay valid for the lifetime of the registry.
    """

    def __init__(self) -> None:
        self._storage: List[T] = []

    def register(self, texture: T) -> TextureId:
        """Store a texture and return its id."""
        self._storage.append(texture)
        return TextureId(len(self._storage) - 1)

    def get(self, texture_id: int) -> T:
        if not 0 <= texture_id < len(self._storage):
            raise IndexError(
                f"Texture id {texture_id} out of range "
                f"({len(self._storage)} registered)"
            )
        return self._storage[texture_id]

    def __getitem__(self, texture_id: int) -> T:
        return self.get(texture_id)

    def __contains__(self, texture_id: Any) -> bool:
        return isinstance(texture_id, int) and 0 <= texture_id < len(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[T]:
        return iter(self._storage)

    def release_all(self) -> None:
        """Free GPU-side resources. Only call at shutdown."""
        for texture in self._storage:
            release = getattr(texture, "release", None)
            if callable(release):
                release()
