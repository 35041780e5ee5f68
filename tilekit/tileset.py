"""Tileset JSON model: asset properties, tile content, tiles and the tileset root."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional

from tilekit.bounding import BoundingVolume, TilesError
from tilekit.transform import Transform

__all__ = ["AssetProperties", "Refine", "Content", "RootTile", "BaseTile"]


def _as_string(value: Any) -> str:
    """A JSON value read as a string; anything that is not a string reads as empty."""
    return value if isinstance(value, str) else ""


def _as_number(value: Any) -> float:
    """A JSON value read as a number; anything that is not a number reads as 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _as_object(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _default_assets() -> dict[str, str]:
    return {"version": "1.0"}


@dataclass
class AssetProperties:
    """The ``asset`` section of a tileset: string properties such as ``version``."""

    TYPE_NAME: ClassVar[str] = "asset"

    assets: dict[str, str] = field(default_factory=_default_assets)

    def to_json(self) -> dict[str, str]:
        return dict(self.assets)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> AssetProperties:
        return cls({key: _as_string(value) for key, value in obj.items()})


class Refine(Enum):
    """How a tile's children refine it."""

    ADD = "ADD"
    REPLACE = "REPLACE"

    def to_json(self) -> str:
        return self.value

    @classmethod
    def from_json(cls, value: Any) -> Refine:
        try:
            return cls(value)
        except ValueError:
            raise TilesError(f"refine must be ADD or REPLACE, got {value!r}") from None


@dataclass
class Content:
    """The content of a tile: a URI and an optional bounding volume."""

    TYPE_NAME: ClassVar[str] = "content"

    uri: str = ""
    bounding_volume: BoundingVolume = field(default_factory=BoundingVolume)

    def to_json(self) -> dict[str, Any]:
        obj: dict[str, Any] = {}
        if self.bounding_volume.has_value():
            obj[BoundingVolume.TYPE_NAME] = self.bounding_volume.to_json()
        obj["uri"] = self.uri
        return obj

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> Content:
        volume = obj.get(BoundingVolume.TYPE_NAME)
        bounding_volume = (
            BoundingVolume.from_json(_as_object(volume))
            if volume is not None
            else BoundingVolume()
        )
        return cls(uri=_as_string(obj.get("uri")), bounding_volume=bounding_volume)


@dataclass
class RootTile:
    """A tile with its bounding volume, error, refinement, transform, content and children."""

    TYPE_NAME: ClassVar[str] = "root"

    bounding_volume: BoundingVolume = field(default_factory=BoundingVolume)
    geometric_error: float = 0.0
    refine: Refine = Refine.REPLACE
    transform: Transform = field(default_factory=Transform)
    content: Optional[Content] = None
    children: list[RootTile] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        obj: dict[str, Any] = {
            BoundingVolume.TYPE_NAME: self.bounding_volume.to_json(),
            "geometricError": self.geometric_error,
            "refine": self.refine.to_json(),
            Transform.TYPE_NAME: self.transform.to_json(),
        }
        if self.content is not None:
            obj[Content.TYPE_NAME] = self.content.to_json()
        obj["children"] = [child.to_json() for child in self.children]
        return obj

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> RootTile:
        bounding_volume = BoundingVolume.from_json(
            _as_object(obj.get(BoundingVolume.TYPE_NAME))
        )
        transform_value = obj.get(Transform.TYPE_NAME)
        transform = (
            Transform.from_json(transform_value)
            if isinstance(transform_value, list)
            else Transform()
        )
        content_value = obj.get(Content.TYPE_NAME)
        content = (
            Content.from_json(_as_object(content_value))
            if content_value is not None
            else None
        )
        refine_value = obj.get("refine")
        refine = Refine.from_json(refine_value) if refine_value is not None else Refine.REPLACE
        children_value = obj.get("children")
        children = [
            cls.from_json(_as_object(child))
            for child in (children_value if isinstance(children_value, list) else [])
        ]
        return cls(
            bounding_volume=bounding_volume,
            geometric_error=_as_number(obj.get("geometricError")),
            refine=refine,
            transform=transform,
            content=content,
            children=children,
        )


@dataclass
class BaseTile:
    """A whole tileset: asset properties, geometric error and the root tile."""

    asset: AssetProperties = field(default_factory=AssetProperties)
    geometric_error: float = 0.0
    root: RootTile = field(default_factory=RootTile)

    def to_json(self) -> dict[str, Any]:
        return {
            AssetProperties.TYPE_NAME: self.asset.to_json(),
            "geometricError": self.geometric_error,
            RootTile.TYPE_NAME: self.root.to_json(),
        }

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> BaseTile:
        return cls(
            asset=AssetProperties.from_json(_as_object(obj.get(AssetProperties.TYPE_NAME))),
            geometric_error=_as_number(obj.get("geometricError")),
            root=RootTile.from_json(_as_object(obj.get(RootTile.TYPE_NAME))),
        )