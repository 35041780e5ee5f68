"""Writer for Batched 3D Model (b3dm) tile content."""

from __future__ import annotations

import json
import struct
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Batched3DModel"]

_HEADER = struct.Struct("<4s6i")


def _pad(data: bytes, offset: int = 0) -> bytes:
    """Pad with spaces so that ``offset + len(result)`` is a multiple of 8."""
    return data + b" " * (-(offset + len(data)) % 8)


def _json_number(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer() and abs(value) < 2 ** 53:
        return int(value)
    return value


@dataclass
class Batched3DModel:
    """A b3dm payload: batch table entries and an embedded binary glTF."""

    batch_length: int = 0
    batch_id: list[int] = field(default_factory=list)
    names: list[str] = field(default_factory=list)
    heights: list[float] = field(default_factory=list)
    glb_buffer: bytes = b""

    def to_bytes(self, with_height: bool) -> bytes:
        """Serialise to b3dm; the batch table holds heights when ``with_height`` is set."""
        feature = _pad(
            f'{{"BATCH_LENGTH":{self.batch_length}}}'.encode("utf-8"), _HEADER.size
        )

        batch_table: dict[str, Any] = {
            "batchId": list(self.batch_id),
            "name": list(self.names),
        }
        if with_height:
            batch_table["height"] = [_json_number(h) for h in self.heights]
        batch = _pad(
            json.dumps(
                batch_table, separators=(",", ":"), sort_keys=True, ensure_ascii=False
            ).encode("utf-8")
        )

        glb = bytes(self.glb_buffer)
        total = _HEADER.size + len(feature) + len(batch) + len(glb)
        header = _HEADER.pack(b"b3dm", 1, total, len(feature), 0, len(batch), 0)
        return header + feature + batch + glb