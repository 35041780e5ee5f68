import math

import pytest

from tilekit.bounding import (
    BoundingVolume,
    BoundingVolumeBox,
    BoundingVolumeRegion,
    BoundingVolumeSphere,
    TilesError,
)


def test_box_round_trip():
    values = [float(v) for v in range(1, 13)]
    assert BoundingVolumeBox.from_json(values).to_json() == values


def test_box_half_lengths_positions():
    values = [float(v) for v in range(1, 13)]
    box = BoundingVolumeBox.from_json(values)
    assert box.half_x_length == values[3]
    assert box.half_y_length == values[7]
    assert box.half_z_length == values[11]
    assert (box.center_x, box.center_y, box.center_z) == tuple(values[:3])


def test_box_geometric_error_value():
    box = BoundingVolumeBox(half_x_length=10.0)
    assert box.geometric_error() == pytest.approx(1.0)


def test_box_geometric_error_uses_largest_axis():
    a = BoundingVolumeBox(half_x_length=1.0, half_y_length=5.0, half_z_length=2.0)
    b = BoundingVolumeBox(half_x_length=5.0)
    c = BoundingVolumeBox(half_z_length=5.0)
    assert a.geometric_error() == pytest.approx(b.geometric_error())
    assert a.geometric_error() == pytest.approx(c.geometric_error())


def test_box_geometric_error_scales_linearly():
    small = BoundingVolumeBox(half_x_length=3.0, half_y_length=4.0)
    large = BoundingVolumeBox(half_x_length=6.0, half_y_length=8.0)
    assert large.geometric_error() == pytest.approx(2 * small.geometric_error())


def test_region_round_trip():
    values = [0.1, 0.2, 0.3, 0.4, -5.0, 50.0]
    region = BoundingVolumeRegion.from_json(values)
    assert region.to_json() == values
    assert region.min_height == values[4]


def test_region_short_array_fills_zero():
    region = BoundingVolumeRegion.from_json([1.0, 2.0])
    assert region.to_json()[2:] == [0.0, 0.0, 0.0, 0.0]


def test_region_get_max_and_min():
    region = BoundingVolumeRegion(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert region.get_max() == (1.0, 2.0, 5.0)
    assert region.get_min() == (3.0, 4.0, 6.0)


def test_region_set_max_and_min():
    region = BoundingVolumeRegion()
    region.set_max((3.0, 4.0, 6.0))
    region.set_min((1.0, 2.0, 5.0))
    assert region.to_json() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


def test_region_merge_max_takes_larger():
    region = BoundingVolumeRegion()
    region.merge_max((1.0, 2.0, 3.0))
    assert (region.east, region.north, region.max_height) == (1.0, 2.0, 3.0)


def test_region_merge_max_keeps_current_when_smaller():
    region = BoundingVolumeRegion(west=2.0, south=3.0, min_height=4.0)
    region.merge_max((1.0, 9.0, 9.0))
    assert (region.east, region.north, region.max_height) == region.get_max()


def test_region_merge_min_takes_smaller():
    region = BoundingVolumeRegion(east=5.0, north=5.0, max_height=5.0)
    region.merge_min((1.0, 2.0, 3.0))
    assert region.get_max() == (1.0, 2.0, 3.0)


def test_region_merge_min_keeps_current_when_larger():
    region = BoundingVolumeRegion(east=1.0, north=1.0, max_height=1.0)
    region.merge_min((7.0, 0.0, 0.0))
    assert region.get_max() == region.get_min()


def test_region_from_center_xy():
    region = BoundingVolumeRegion.from_center_xy(120.0, 30.0, 2.0, 1.0, -3.0, 40.0)
    assert (region.west + region.east) / 2 == pytest.approx(math.radians(120.0))
    assert (region.south + region.north) / 2 == pytest.approx(math.radians(30.0))
    assert region.east > region.west
    assert region.north > region.south
    assert (region.east - region.west) / (region.north - region.south) == pytest.approx(2.0)
    assert (region.min_height, region.max_height) == (-3.0, 40.0)


def test_region_from_center_xy_widens_span():
    region = BoundingVolumeRegion.from_center_xy(0.0, 0.0, 1.0, 1.0, 0.0, 0.0)
    assert region.east - region.west > math.radians(1.0)


def test_sphere_round_trip():
    values = [1.5, -2.5, 3.5, 10.0]
    sphere = BoundingVolumeSphere.from_json(values)
    assert sphere.radius == values[3]
    assert sphere.to_json() == values


def test_volume_empty_has_no_value():
    assert BoundingVolume().has_value() is False
    with pytest.raises(TilesError):
        BoundingVolume().to_json()


@pytest.mark.parametrize(
    "key,values",
    [
        ("box", [float(v) for v in range(12)]),
        ("region", [0.1, 0.2, 0.3, 0.4, 0.0, 10.0]),
        ("sphere", [1.0, 2.0, 3.0, 4.0]),
    ],
)
def test_volume_round_trip(key, values):
    volume = BoundingVolume.from_json({key: values})
    assert volume.has_value() is True
    assert volume.to_json() == {key: values}


def test_volume_reads_alphabetically_first_key():
    volume = BoundingVolume.from_json({"sphere": [1, 2, 3, 4], "box": list(range(12))})
    assert volume.sphere is None
    assert volume.box.to_json() == [float(v) for v in range(12)]


def test_volume_to_json_prefers_box():
    volume = BoundingVolume(
        box=BoundingVolumeBox(center_x=1.0), sphere=BoundingVolumeSphere(radius=2.0)
    )
    assert list(volume.to_json()) == ["box"]


def test_volume_unknown_key():
    with pytest.raises(TilesError):
        BoundingVolume.from_json({"cylinder": [1, 2, 3]})


def test_volume_empty_object():
    with pytest.raises(TilesError):
        BoundingVolume.from_json({})