"""Colour conversions between float RGB, 8-bit RGB and packed 24-bit pixels."""

from __future__ import annotations

RgbInt = tuple[int, int, int]
RgbFloat = tuple[float, float, float]

_HALF_STEP = 0.5 / 256.0


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp_rgb_int(r: int, g: int, b: int) -> RgbInt:
    """Clamp each channel into the range 0..255."""
    return (
        int(_clamp(r, 0, 255)),
        int(_clamp(g, 0, 255)),
        int(_clamp(b, 0, 255)),
    )


def rgb_to_rgb_int(r: float, g: float, b: float) -> RgbInt:
    """Convert float channels in [0, 1] to 8-bit channels.

    Inputs outside [0, 1] are clamped first; each channel maps to
    ``int(256 * value)``, with 1.0 landing on 255.
    """
    scaled = (int(256 * _clamp(channel, 0.0, 1.0)) for channel in (r, g, b))
    return clamp_rgb_int(*scaled)


def rgb_int_to_pixel(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels (clamped) into a 0xRRGGBB pixel value."""
    r, g, b = clamp_rgb_int(r, g, b)
    return (r << 16) | (g << 8) | b


def pixel_to_rgb_int(pixel: int) -> RgbInt:
    """Unpack a 0xRRGGBB pixel value into 8-bit channels."""
    return ((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF)


def rgb_int_to_rgb(rgb_int: tuple[int, int, int]) -> RgbFloat:
    """Convert 8-bit channels to floats at the middle of each channel's interval."""
    r, g, b = rgb_int
    return (r / 256.0 + _HALF_STEP, g / 256.0 + _HALF_STEP, b / 256.0 + _HALF_STEP)