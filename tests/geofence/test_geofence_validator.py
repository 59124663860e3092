import pytest

from src.hrms_attendance.hrms_attendance.core.exceptions import ValidationError
from src.hrms_attendance.hrms_attendance.geofence.model import GeoPoint
from src.hrms_attendance.hrms_attendance.geofence.validator import haversine_km, validate_proximity

BANGALORE = GeoPoint(12.9716, 77.5946)


def test_same_point_is_accepted_with_zero_distance():
    result = validate_proximity(BANGALORE, BANGALORE, 300)

    assert result.accepted is True
    assert result.distance_meters == 0


@pytest.mark.parametrize(
    "point",
    [GeoPoint(0, 0), GeoPoint(-33.8688, 151.2093), GeoPoint(90, 180), GeoPoint(-90, -180), GeoPoint(51.5, -0.12)],
)
def test_equal_points_accepted_for_zero_radius(point):
    result = validate_proximity(point, point, 0)

    assert result.distance_meters == 0
    assert result.accepted is True


def test_point_about_1500m_away_is_rejected():
    claimed = GeoPoint(12.9816, 77.6046)

    result = validate_proximity(claimed, BANGALORE, 300)

    assert result.accepted is False
    assert 1500 < result.distance_meters < 1600


@pytest.mark.parametrize(
    "a,b",
    [
        (GeoPoint(12.9716, 77.5946), GeoPoint(12.9816, 77.6046)),
        (GeoPoint(40.7128, -74.0060), GeoPoint(34.0522, -118.2437)),
        (GeoPoint(-33.8688, 151.2093), GeoPoint(35.6762, 139.6503)),
    ],
)
def test_distance_is_symmetric(a, b):
    assert haversine_km(a, b) == pytest.approx(haversine_km(b, a))


def test_one_degree_of_latitude_is_about_111km():
    assert haversine_km(GeoPoint(0, 0), GeoPoint(1, 0)) == pytest.approx(111.19, abs=0.01)


def test_boundary_distance_is_inclusive():
    claimed = GeoPoint(12.9736, 77.5946)
    distance = validate_proximity(claimed, BANGALORE, 0).distance_meters

    assert validate_proximity(claimed, BANGALORE, distance).accepted is True
    assert validate_proximity(claimed, BANGALORE, distance - 1).accepted is False


@pytest.mark.parametrize("point", [GeoPoint(91, 0), GeoPoint(-91, 0), GeoPoint(0, 181), GeoPoint(0, -180.5)])
def test_out_of_range_coordinates_are_invalid(point):
    with pytest.raises(ValidationError):
        validate_proximity(point, BANGALORE, 300)


def test_negative_radius_is_invalid():
    with pytest.raises(ValidationError):
        validate_proximity(BANGALORE, BANGALORE, -1)
