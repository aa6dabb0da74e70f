import pytest

from graphkit.colors import (
    clamp_rgb_int,
    pixel_to_rgb_int,
    rgb_int_to_pixel,
    rgb_int_to_rgb,
    rgb_to_rgb_int,
)


def test_clamp_limits_channels():
    assert clamp_rgb_int(-5, 300, 10) == (0, 255, 10)


def test_clamp_keeps_valid_values():
    assert clamp_rgb_int(1, 2, 3) == (1, 2, 3)


def test_float_one_maps_to_255():
    assert rgb_to_rgb_int(1.0, 1.0, 1.0) == (255, 255, 255)


def test_float_out_of_range_is_clamped():
    assert rgb_to_rgb_int(-2.0, 5.0, 0.0) == (0, 255, 0)


def test_white_pixel():
    assert rgb_int_to_pixel(255, 255, 255) == 0xFFFFFF


def test_pixel_clamps_inputs():
    assert rgb_int_to_pixel(999, -1, 0) == rgb_int_to_pixel(255, 0, 0)


@pytest.mark.parametrize("rgb", [(0, 0, 0), (1, 2, 3), (255, 0, 128), (17, 200, 99)])
def test_pixel_round_trip(rgb):
    assert pixel_to_rgb_int(rgb_int_to_pixel(*rgb)) == rgb


def test_pixel_to_rgb_ignores_high_bits():
    assert pixel_to_rgb_int(0x7F000000 | rgb_int_to_pixel(4, 5, 6)) == (4, 5, 6)


def test_rgb_int_to_rgb_black_is_half_step():
    assert rgb_int_to_rgb((0, 0, 0)) == (0.5 / 256.0,) * 3


@pytest.mark.parametrize("value", [0, 1, 64, 127, 200, 255])
def test_rgb_int_round_trip_through_floats(value):
    floats = rgb_int_to_rgb((value, value, value))
    assert rgb_to_rgb_int(*floats) == (value, value, value)


def test_rgb_int_to_rgb_stays_in_unit_interval():
    for channel in rgb_int_to_rgb((0, 128, 255)):
        assert 0.0 < channel < 1.0