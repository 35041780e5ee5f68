"""Building blocks for Cesium 3D Tiles: tileset models, bounding volumes, transforms, b3dm, earcut and DXT1."""

__version__ = "2.1.0"
__all__ = ["b3dm", "bounding", "dxt", "earcut", "tileset", "transform"]