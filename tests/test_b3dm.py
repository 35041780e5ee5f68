import json
import struct

from tilekit.b3dm import Batched3DModel

HEADER = struct.Struct("<4s6i")


def _model():
    return Batched3DModel(
        batch_length=3,
        batch_id=[0, 1, 2],
        names=["a", "b", "c"],
        heights=[1.0, 2.5, 3.0],
        glb_buffer=b"glTF" + bytes(12),
    )


def _parse(data):
    magic, version, total, feature_len, feature_bin, batch_len, batch_bin = HEADER.unpack_from(data)
    feature = data[28:28 + feature_len]
    batch = data[28 + feature_len:28 + feature_len + batch_len]
    glb = data[28 + feature_len + batch_len:]
    return magic, version, total, feature_len, feature_bin, batch_len, batch_bin, feature, batch, glb


def test_header_fields():
    data = _model().to_bytes(False)
    magic, version, total, _, feature_bin, _, batch_bin, *_ = _parse(data)
    assert magic == b"b3dm"
    assert version == 1
    assert total == len(data)
    assert feature_bin == 0
    assert batch_bin == 0


def test_feature_table_is_padded_and_holds_batch_length():
    data = _model().to_bytes(False)
    _, _, _, feature_len, _, _, _, feature, _, _ = _parse(data)
    assert (28 + feature_len) % 8 == 0
    assert feature.rstrip(b" ") == b'{"BATCH_LENGTH":3}'
    assert json.loads(feature) == {"BATCH_LENGTH": 3}


def test_batch_table_without_height():
    data = _model().to_bytes(False)
    _, _, _, _, _, batch_len, _, _, batch, _ = _parse(data)
    assert batch_len % 8 == 0
    assert json.loads(batch) == {"batchId": [0, 1, 2], "name": ["a", "b", "c"]}


def test_batch_table_with_height():
    data = _model().to_bytes(True)
    _, _, _, _, _, _, _, _, batch, _ = _parse(data)
    table = json.loads(batch)
    assert table["height"] == [1.0, 2.5, 3.0]
    assert b'"height":[1,2.5,3]' in batch


def test_glb_is_appended_unchanged():
    model = _model()
    data = model.to_bytes(True)
    *_, glb = _parse(data)
    assert glb == model.glb_buffer


def test_empty_model_is_aligned():
    data = Batched3DModel().to_bytes(False)
    _, _, total, feature_len, _, batch_len, _, _, batch, glb = _parse(data)
    assert total == len(data)
    assert len(data) % 8 == 0
    assert glb == b""
    assert json.loads(batch) == {"batchId": [], "name": []}
    assert total == 28 + feature_len + batch_len