# tilekit

Pure-Python building blocks for producing Cesium 3D Tiles. No packages are
needed beyond the standard library.

## Modules

- `tilekit.tileset` – the `tileset.json` model: `BaseTile`, `RootTile`,
  `Content`, `Refine` (`ADD` or `REPLACE`) and `AssetProperties`, each with
  `to_json()` and a `from_json()` class method. `AssetProperties` defaults to
  `{"version": "1.0"}`; `RootTile` defaults to `Refine.REPLACE` and an identity
  `Transform`.
- `tilekit.bounding` – `BoundingVolumeBox`, `BoundingVolumeRegion`,
  `BoundingVolumeSphere` and the `BoundingVolume` wrapper that holds one of
  them. `BoundingVolume.to_json()` writes the first volume set, in the order box,
  region, sphere. An empty or unknown bounding volume raises `TilesError`, as
  does an unknown `refine` value in `tilekit.tileset`.
  `BoundingVolumeRegion.from_center_xy()` builds a region in radians around a
  centre given in degrees, widened by 5%; `BoundingVolumeBox.geometric_error()`
  is the largest extent of the box divided by 20.
- `tilekit.transform` – the 4×4 `Transform` of a tile, written to JSON in
  column-major order. `Transform.from_xyz(lon, lat, min_height)` gives the
  east-north-up frame at a point (in degrees) on the WGS84 ellipsoid.
- `tilekit.b3dm` – `Batched3DModel.to_bytes(with_height)` encodes a Batched 3D
  Model (`.b3dm`): a 28-byte header, a feature table holding `BATCH_LENGTH`, a
  batch table with `batchId`, `name` and, when `with_height` is true, `height`,
  followed by the binary glTF given in `glb_buffer`.
- `tilekit.earcut` – `earcut(rings)` triangulates a polygon given as an outer
  ring followed by holes, returning a flat list of vertex indices, three per
  triangle, numbering the points of all rings consecutively.
- `tilekit.dxt` – `decode_dxt1(data, width, height)` decodes DXT1/BC1 data to
  packed RGB bytes and returns `(pixels, width, height)`; images larger than
  2048 pixels on a side are halved until they fit. `rgb565_to_rgb`,
  `mix_color` and `resize_image` are available on their own.

## Installation

```
pip install .
```

## Examples

Triangulate a square that has a square hole in it:

```python
from tilekit.earcut import earcut

outer = [(0, 0), (10, 0), (10, 10), (0, 10)]
hole = [(2, 2), (8, 2), (8, 8), (2, 8)]
indices = earcut([outer, hole])   # every three indices form a triangle
```

Build a tileset:

```python
import json
from tilekit.bounding import BoundingVolume, BoundingVolumeRegion
from tilekit.tileset import BaseTile, RootTile
from tilekit.transform import Transform

region = BoundingVolumeRegion.from_center_xy(116.39, 39.9, 0.01, 0.01, 0.0, 100.0)
root = RootTile(
    bounding_volume=BoundingVolume(region=region),
    geometric_error=10.0,
    transform=Transform.from_xyz(116.39, 39.9, 0.0),
)
tileset = BaseTile(geometric_error=20.0, root=root)
print(json.dumps(tileset.to_json(), indent=2))
```

Write a `.b3dm` file around an existing binary glTF:

```python
from pathlib import Path
from tilekit.b3dm import Batched3DModel

glb_bytes = Path("model.glb").read_bytes()
model = Batched3DModel(
    batch_length=1,
    batch_id=[0],
    names=["building"],
    heights=[12.5],
    glb_buffer=glb_bytes,
)
Path("tile.b3dm").write_bytes(model.to_bytes(with_height=True))
```

## What this package does not do

tilekit is a library only. It has no command-line converter, does not read
OSGB models or shapefiles, does not build glTF models or quadtrees of tiles, and
does not reproject coordinates between spatial reference systems. It supplies
the pieces such a converter is built from: tileset JSON, b3dm encoding,
triangulation and texture decoding.

## Running the tests

```
pip install .[test]
pytest
```