from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from legacy_skin.ports.sample_store import SampleStore
from legacy_skin.ports.texture_store import TextureStore

TEXTURE_EXTENSIONS = ("png", "jpg")
# Legacy skins also ship ogg samples next to wav/mp3.
SAMPLE_EXTENSIONS = ("wav", "mp3", "ogg")


@dataclass
class InMemoryTextureStore(TextureStore):
    # Reference adapter: exact-name lookups over a prepared mapping.
    _textures: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, textures: Mapping[str, Any]) -> InMemoryTextureStore:
        return cls(_textures=dict(textures))

    def get(self, name: str) -> Any | None:
        return self._textures.get(name)

    def close(self) -> None:
        self._textures.clear()


@dataclass
class InMemorySampleStore(SampleStore):
    # Reference adapter for audio samples; mirrors InMemoryTextureStore.
    _samples: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, samples: Mapping[str, Any]) -> InMemorySampleStore:
        return cls(_samples=dict(samples))

    def get(self, name: str) -> Any | None:
        return self._samples.get(name)

    def close(self) -> None:
        self._samples.clear()


@dataclass(frozen=True, slots=True)
class ResourceFile:
    # Opaque handle returned by directory-backed stores; decoding happens elsewhere.
    name: str
    path: Path


class DirectoryResourceStore(TextureStore, SampleStore):
    """Resolve lookup names to files below a skin directory.

    Skin archives are authored on case-insensitive file systems, so the
    directory is indexed once by lower-cased relative path. A name is tried
    as given, then with each configured extension in order.
    """

    def __init__(self, root: Path, extensions: Iterable[str]) -> None:
        self._root = root
        self._extensions = tuple(ext.lstrip(".").lower() for ext in extensions)
        self._index: dict[str, Path] = {}
        if root.is_dir():
            for path in sorted(root.rglob("*")):
                if path.is_file():
                    key = path.relative_to(root).as_posix().lower()
                    self._index.setdefault(key, path)

    @property
    def root(self) -> Path:
        return self._root

    def get(self, name: str) -> ResourceFile | None:
        base = name.replace("\\", "/").lower()
        for candidate in (base, *(f"{base}.{ext}" for ext in self._extensions)):
            path = self._index.get(candidate)
            if path is not None:
                return ResourceFile(name=name, path=path)
        return None

    def close(self) -> None:
        self._index.clear()


def directory_texture_store(root: Path) -> DirectoryResourceStore:
    return DirectoryResourceStore(root, TEXTURE_EXTENSIONS)


def directory_sample_store(root: Path) -> DirectoryResourceStore:
    return DirectoryResourceStore(root, SAMPLE_EXTENSIONS)
