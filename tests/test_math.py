import pytest

from protolife.math import Rect, Vec2, inverse_lerp, lerp, remap

ZERO = Vec2(0.0, 0.0)


def square(center=ZERO, size=100.0):
    return Rect.from_center_size(center, Vec2(size, size))


class TestToroidalDisplacement:
    def test_zero(self):
        assert square().toroidal_displacement(ZERO, ZERO) == ZERO

    def test_diagonal(self):
        assert square().toroidal_displacement(ZERO, Vec2(25.0, 25.0)) == Vec2(25.0, 25.0)

    def test_wrap_x(self):
        assert square().toroidal_displacement(ZERO, Vec2(75.0, 0.0)) == Vec2(-25.0, 0.0)

    def test_wrap_y(self):
        assert square().toroidal_displacement(ZERO, Vec2(0.0, 75.0)) == Vec2(0.0, -25.0)

    def test_wrap_xy(self):
        assert square().toroidal_displacement(ZERO, Vec2(75.0, 75.0)) == Vec2(-25.0, -25.0)

    def test_non_zero_origin(self):
        rect = square(Vec2(50.0, -25.0))
        assert rect.toroidal_displacement(Vec2(90.0, 23.0), Vec2(10.0, -74.0)) == Vec2(20.0, 3.0)


class TestToroidalWrap:
    def test_zero(self):
        assert square().toroidal_wrap(ZERO) == ZERO

    def test_within_bounds(self):
        assert square().toroidal_wrap(Vec2(25.0, 25.0)) == Vec2(25.0, 25.0)

    def test_within_bounds_negative(self):
        assert square().toroidal_wrap(Vec2(-25.0, -25.0)) == Vec2(-25.0, -25.0)

    def test_wrap_x(self):
        assert square().toroidal_wrap(Vec2(75.0, 0.0)) == Vec2(-25.0, 0.0)

    def test_wrap_y(self):
        assert square().toroidal_wrap(Vec2(0.0, 75.0)) == Vec2(0.0, -25.0)

    def test_wrap_xy(self):
        assert square().toroidal_wrap(Vec2(75.0, 75.0)) == Vec2(-25.0, -25.0)

    def test_non_zero_origin_within_bounds(self):
        rect = square(Vec2(100.0, 50.0), 80.0)
        assert rect.toroidal_wrap(Vec2(120.0, 70.0)) == Vec2(120.0, 70.0)

    def test_non_zero_origin_outside_bounds(self):
        rect = square(Vec2(100.0, 50.0), 80.0)
        assert rect.toroidal_wrap(Vec2(160.0, 110.0)) == Vec2(80.0, 30.0)

    def test_far_outside_wraps_many_times(self):
        wrapped = square().toroidal_wrap(Vec2(1025.0, -1025.0))
        assert wrapped == Vec2(25.0, -25.0)


def test_rect_constructors_agree():
    a = Rect.from_center_size(Vec2(1.0, 2.0), Vec2(10.0, 20.0))
    b = Rect.from_center_half_size(Vec2(1.0, 2.0), Vec2(5.0, 10.0))
    assert a == b
    assert a.width() == 10.0
    assert a.height() == 20.0


def test_lerp_endpoints():
    assert lerp(3.0, 7.0, 0.0) == 3.0
    assert lerp(3.0, 7.0, 1.0) == 7.0


def test_inverse_lerp_undoes_lerp():
    value = lerp(-4.0, 12.0, 0.25)
    assert inverse_lerp(-4.0, 12.0, value) == pytest.approx(0.25)


def test_remap_endpoints():
    assert remap(0.0, 0.0, 10.0, 100.0, 200.0) == 100.0
    assert remap(10.0, 0.0, 10.0, 100.0, 200.0) == 200.0


def test_vector_length_and_normalize():
    v = Vec2(3.0, 4.0)
    assert v.length() == 5.0
    assert v.normalize().length() == pytest.approx(1.0)


def test_normalize_zero_is_nan():
    n = Vec2(0.0, 0.0).normalize()
    assert (str(n.x), str(n.y)) == ("nan", "nan")


def test_distance_squared():
    assert Vec2(1.0, 1.0).distance_squared(Vec2(4.0, 5.0)) == 25.0


def test_clamp_length():
    assert Vec2(30.0, 40.0).clamp_length(0.0, 5.0).length() == pytest.approx(5.0)
    assert Vec2(3.0, 4.0).clamp_length(0.0, 200.0) == Vec2(3.0, 4.0)
    with pytest.raises(ValueError):
        Vec2(1.0, 1.0).clamp_length(2.0, 1.0)


def test_vector_arithmetic():
    assert Vec2(1.0, 2.0) + Vec2(3.0, 4.0) == Vec2(4.0, 6.0)
    assert 2.0 * Vec2(1.0, 2.0) == Vec2(2.0, 4.0)
    assert -Vec2(1.0, -2.0) == Vec2(-1.0, 2.0)