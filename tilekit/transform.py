"""Tile transform: a 4x4 matrix stored column-major in tileset JSON."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar

__all__ = ["Transform"]

Matrix = tuple[tuple[float, float, float, float], ...]

_IDENTITY: Matrix = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

# Squared radii of the WGS84 ellipsoid.
_RADII_SQUARED = (40680631590769.0, 40680631590769.0, 40408299984661.4)


def _unit(vector: tuple[float, float, float]) -> tuple[float, float, float]:
    length = math.sqrt(sum(c * c for c in vector))
    return (vector[0] / length, vector[1] / length, vector[2] / length)


@dataclass
class Transform:
    """A 4x4 matrix; ``matrix[row][col]``, with translation in the last column."""

    TYPE_NAME: ClassVar[str] = "transform"

    matrix: Matrix = field(default=_IDENTITY)

    def to_json(self) -> list[float]:
        """The matrix as 16 numbers in column-major order."""
        return [value for column in zip(*self.matrix) for value in column]

    @classmethod
    def from_json(cls, array: Sequence[Any]) -> Transform:
        values = [float(v) for v in list(array)[:16]]
        values.extend([0.0] * (16 - len(values)))
        columns = [values[start:start + 4] for start in range(0, 16, 4)]
        return cls(tuple(tuple(row) for row in zip(*columns)))

    @classmethod
    def from_xyz(cls, lon: float, lat: float, min_height: float) -> Transform:
        """East-north-up frame at a geodetic position given in degrees."""
        lonr = math.radians(lon)
        latr = math.radians(lat)
        a, b, c = _RADII_SQUARED

        xn = math.cos(lonr) * math.cos(latr)
        yn = math.sin(lonr) * math.cos(latr)
        zn = math.sin(latr)

        x0, y0, z0 = a * xn, b * yn, c * zn
        gamma = math.sqrt(xn * x0 + yn * y0 + zn * z0)
        px, py, pz = x0 / gamma, y0 / gamma, z0 / gamma

        dx, dy, dz = xn * min_height, yn * min_height, zn * min_height

        east = (-y0, x0, 0.0)
        north = (
            y0 * east[2] - east[1] * z0,
            z0 * east[0] - east[2] * x0,
            x0 * east[1] - east[0] * y0,
        )
        east_unit = _unit(east)
        north_unit = _unit(north)

        return cls(
            (
                (east_unit[0], north_unit[0], xn, px + dx),
                (east_unit[1], north_unit[1], yn, py + dy),
                (east_unit[2], north_unit[2], zn, pz + dz),
                (0.0, 0.0, 0.0, 1.0),
            )
        )