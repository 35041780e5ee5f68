"""Bounding volumes of 3D Tiles: oriented box, geographic region and sphere."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

__all__ = [
    "TilesError",
    "BoundingVolumeBox",
    "BoundingVolumeRegion",
    "BoundingVolumeSphere",
    "BoundingVolume",
]

Point = tuple[float, float, float]


class TilesError(Exception):
    """Raised when tileset data is malformed or incomplete."""


def _numbers(array: Sequence[Any], count: int) -> list[float]:
    """The first ``count`` numbers of a JSON array; missing entries read as 0."""
    values = [float(v) for v in list(array)[:count]]
    values.extend([0.0] * (count - len(values)))
    return values


def _point(point: Sequence[float]) -> Point:
    x, y, z = point
    return (float(x), float(y), float(z))


@dataclass
class BoundingVolumeBox:
    """An oriented box given by its centre and three half-axis vectors."""

    TYPE_NAME: ClassVar[str] = "box"

    center_x: float = 0.0
    center_y: float = 0.0
    center_z: float = 0.0
    half_x_length: float = 0.0
    direction_x0: float = 0.0
    direction_x1: float = 0.0
    direction_y0: float = 0.0
    half_y_length: float = 0.0
    direction_y1: float = 0.0
    direction_z0: float = 0.0
    direction_z1: float = 0.0
    half_z_length: float = 0.0

    def to_json(self) -> list[float]:
        return [
            self.center_x, self.center_y, self.center_z,
            self.half_x_length, self.direction_x0, self.direction_x1,
            self.direction_y0, self.half_y_length, self.direction_y1,
            self.direction_z0, self.direction_z1, self.half_z_length,
        ]

    @classmethod
    def from_json(cls, array: Sequence[Any]) -> BoundingVolumeBox:
        return cls(*_numbers(array, 12))

    def geometric_error(self) -> float:
        """The largest extent of the box along its axes, divided by 20."""
        return max(
            2 * self.half_y_length, 2 * self.half_z_length, 2 * self.half_x_length
        ) / 20.0


@dataclass
class BoundingVolumeRegion:
    """A geographic region: longitude and latitude bounds in radians, heights in metres."""

    TYPE_NAME: ClassVar[str] = "region"

    west: float = 0.0
    south: float = 0.0
    east: float = 0.0
    north: float = 0.0
    min_height: float = 0.0
    max_height: float = 0.0

    def to_json(self) -> list[float]:
        return [self.west, self.south, self.east, self.north, self.min_height, self.max_height]

    @classmethod
    def from_json(cls, array: Sequence[Any]) -> BoundingVolumeRegion:
        return cls(*_numbers(array, 6))

    def get_max(self) -> Point:
        return (self.west, self.south, self.min_height)

    def get_min(self) -> Point:
        return (self.east, self.north, self.max_height)

    def set_max(self, point: Sequence[float]) -> None:
        self.east, self.north, self.max_height = _point(point)

    def set_min(self, point: Sequence[float]) -> None:
        self.west, self.south, self.min_height = _point(point)

    def merge_max(self, point: Sequence[float]) -> None:
        """Store the lexicographically larger of ``point`` and ``get_max()`` via ``set_max``."""
        candidate = _point(point)
        current = self.get_max()
        self.set_max(current if candidate < current else candidate)

    def merge_min(self, point: Sequence[float]) -> None:
        """Store the lexicographically smaller of ``point`` and ``get_min()`` via ``set_min``."""
        candidate = _point(point)
        current = self.get_min()
        self.set_min(candidate if candidate < current else current)

    @classmethod
    def from_center_xy(
        cls,
        center_x: float,
        center_y: float,
        x_diff: float,
        y_diff: float,
        min_height: float,
        max_height: float,
    ) -> BoundingVolumeRegion:
        """Build a region around a centre given in degrees, widened by 5%."""
        cx = math.radians(center_x)
        cy = math.radians(center_y)
        dx = math.radians(x_diff) * 1.05
        dy = math.radians(y_diff) * 1.05
        return cls(
            west=cx - dx / 2,
            south=cy - dy / 2,
            east=cx + dx / 2,
            north=cy + dy / 2,
            min_height=min_height,
            max_height=max_height,
        )


@dataclass
class BoundingVolumeSphere:
    """A sphere given by centre and radius."""

    TYPE_NAME: ClassVar[str] = "sphere"

    center_x: float = 0.0
    center_y: float = 0.0
    center_z: float = 0.0
    radius: float = 0.0

    def to_json(self) -> list[float]:
        return [self.center_x, self.center_y, self.center_z, self.radius]

    @classmethod
    def from_json(cls, array: Sequence[Any]) -> BoundingVolumeSphere:
        return cls(*_numbers(array, 4))


_KINDS = {
    kind.TYPE_NAME: kind
    for kind in (BoundingVolumeBox, BoundingVolumeRegion, BoundingVolumeSphere)
}


@dataclass
class BoundingVolume:
    """A bounding volume holding a box, a region or a sphere."""

    TYPE_NAME: ClassVar[str] = "boundingVolume"

    box: Optional[BoundingVolumeBox] = None
    region: Optional[BoundingVolumeRegion] = None
    sphere: Optional[BoundingVolumeSphere] = None

    def has_value(self) -> bool:
        return self.box is not None or self.region is not None or self.sphere is not None

    def to_json(self) -> dict[str, list[float]]:
        """Serialise the first set volume, in the order box, region, sphere."""
        for volume in (self.box, self.region, self.sphere):
            if volume is not None:
                return {volume.TYPE_NAME: volume.to_json()}
        raise TilesError("BoundingVolume type must be box,region,sphere")

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> BoundingVolume:
        """Read the volume stored under the alphabetically first key."""
        if not obj:
            raise TilesError("BoundingVolume type must be box,region,sphere")
        key = min(obj)
        kind = _KINDS.get(key)
        if kind is None:
            raise TilesError("BoundingVolume type must be box,region,sphere")
        return cls(**{key: kind.from_json(obj[key])})