import pytest

from protolife.math import Vec2, lerp
from protolife.params import (
    SimulationParams,
    magnitude,
    scale_bounds,
    simulation_dimensions,
)

DEFAULT = SimulationParams.DEFAULT


def close_to(value):
    return pytest.approx(value, abs=0.00001)


def test_repulsed_self():
    assert magnitude(DEFAULT, 1.0, 0.0) == close_to(-1.0)


def test_repulsed_other():
    assert magnitude(DEFAULT, -1.0, DEFAULT.peak_attraction_radius) == close_to(-1.0)


def test_balanced():
    assert magnitude(DEFAULT, 1.0, DEFAULT.repulsion_radius) == close_to(0.0)


def test_attracted():
    assert magnitude(DEFAULT, 1.0, DEFAULT.peak_attraction_radius) == close_to(1.0)


def test_halfway_repulsed():
    assert magnitude(DEFAULT, 1.0, DEFAULT.repulsion_radius / 2.0) == close_to(-0.5)


def test_halfway_attracted():
    distance = lerp(DEFAULT.repulsion_radius, DEFAULT.peak_attraction_radius, 0.5)
    assert magnitude(DEFAULT, 1.0, distance) == close_to(0.5)


def test_halfway_attracted_otherside():
    distance = lerp(DEFAULT.peak_attraction_radius, DEFAULT.attraction_radius, 0.5)
    assert magnitude(DEFAULT, 1.0, distance) == close_to(0.5)


def test_zero_repulsion_radius_at_zero_distance_is_nan():
    params = SimulationParams(repulsion_radius=0.0)
    assert str(magnitude(params, 1.0, 0.0)) == "nan"


@pytest.mark.parametrize(
    "width, height, expected",
    [
        (1920.0, 1080.0, (0.1, 1.0)),
        (3840.0, 2160.0, (0.1, 1.0)),
        (1920.0, 540.0, (0.1, 1.0)),
        (960.0, 1080.0, (0.1, 1.0)),
        (1280.0, 720.0, (0.1, 1.5)),
        (720.0, 960.0, (0.1, 1.125)),
    ],
)
def test_scale_bounds(width, height, expected):
    assert scale_bounds(width, height) == expected


def test_simulation_dimensions_has_minimum():
    assert simulation_dimensions(800.0, 600.0) == Vec2(1920.0, 1080.0)


def test_simulation_dimensions_keeps_large_screen():
    assert simulation_dimensions(2560.0, 1440.0) == Vec2(2560.0, 1440.0)


def test_dict_round_trip():
    params = SimulationParams(friction=2.5, force_strength=80.0, num_colours=3)
    assert SimulationParams.from_dict(params.to_dict()) == params


def test_from_dict_ignores_unknown_keys():
    data = DEFAULT.to_dict()
    data["weights"] = [0] * 36
    assert SimulationParams.from_dict(data) == DEFAULT


def test_from_dict_missing_field():
    data = DEFAULT.to_dict()
    del data["friction"]
    with pytest.raises(ValueError):
        SimulationParams.from_dict(data)


def test_from_dict_rejects_bool_colour_count():
    data = DEFAULT.to_dict()
    data["num_colours"] = True
    with pytest.raises(ValueError):
        SimulationParams.from_dict(data)


def test_from_dict_rejects_non_numeric():
    data = DEFAULT.to_dict()
    data["decay_rate"] = "fast"
    with pytest.raises(ValueError):
        SimulationParams.from_dict(data)


def test_from_dict_converts_integers_to_float():
    data = DEFAULT.to_dict()
    data["friction"] = 3
    params = SimulationParams.from_dict(data)
    assert isinstance(params.friction, float) and params.friction == 3