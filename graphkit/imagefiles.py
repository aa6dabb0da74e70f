"""Saving and loading canvas images as 24-bit BMP and 32-bit XWD files."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Union

from graphkit.canvas import Canvas
from graphkit.colors import pixel_to_rgb_int

PathLike = Union[str, "os.PathLike[str]"]

BMP_HEADER_SIZE = 54
XWD_HEADER_SIZE = 104
_XWD_FIELD_COUNT = 25
_XWD_NAME_PADDING = 4

_BMP_TEMPLATE = bytes(
    [
        0x42, 0x4D,
        0x00, 0x00, 0x00, 0x00,  # file size
        0x00, 0x00,
        0x00, 0x00,
        0x36, 0x00, 0x00, 0x00,
        0x28, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00,  # width in pixels
        0x00, 0x00, 0x00, 0x00,  # height in pixels
        0x01, 0x00,
        0x18, 0x00,
        0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00,  # size of raw pixel data
        0x13, 0x0B, 0x00, 0x00,
        0x13, 0x0B, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00,
    ]
)

_BMP_FILE_SIZE_AT = 0x02
_BMP_WIDTH_AT = 0x12
_BMP_HEIGHT_AT = 0x16
_BMP_RAW_SIZE_AT = 0x22


class ImageFileError(ValueError):
    """Raised when an image file is malformed or does not match what is expected."""


def _bmp_row_size(width: int) -> int:
    return ((3 * width + 3) // 4) * 4


def _read_bmp_header(data: bytes) -> tuple[int, int, int, int]:
    """Return (file_size, width, height, raw_size) from a BMP header."""
    if len(data) < BMP_HEADER_SIZE:
        raise ImageFileError("BMP header is truncated")
    if data[0:2] != b"BM":
        raise ImageFileError("not a BMP file: missing 'BM' signature")
    (file_size,) = struct.unpack_from("<i", data, _BMP_FILE_SIZE_AT)
    (width,) = struct.unpack_from("<i", data, _BMP_WIDTH_AT)
    (height,) = struct.unpack_from("<i", data, _BMP_HEIGHT_AT)
    (raw_size,) = struct.unpack_from("<i", data, _BMP_RAW_SIZE_AT)
    return file_size, width, height, raw_size


def save_bmp(canvas: Canvas, path: PathLike) -> None:
    """Write the canvas as an uncompressed 24-bit bottom-up BMP file."""
    width, height = canvas.width, canvas.height
    row_size = _bmp_row_size(width)
    raw_size = row_size * height
    header = bytearray(_BMP_TEMPLATE)
    struct.pack_into("<i", header, _BMP_FILE_SIZE_AT, raw_size + BMP_HEADER_SIZE)
    struct.pack_into("<i", header, _BMP_WIDTH_AT, width)
    struct.pack_into("<i", header, _BMP_HEIGHT_AT, height)
    struct.pack_into("<i", header, _BMP_RAW_SIZE_AT, raw_size)

    body = bytearray()
    padding = bytes(row_size - 3 * width)
    for y in range(height):
        for x in range(width):
            r, g, b = pixel_to_rgb_int(canvas.get_pixel(x, y))
            body += bytes((b, g, r))
        body += padding

    with open(path, "wb") as stream:
        stream.write(header)
        stream.write(body)


def bmp_dimensions(path: PathLike) -> tuple[int, int]:
    """Return (width, height) stored in a BMP file's header."""
    with open(path, "rb") as stream:
        header = stream.read(BMP_HEADER_SIZE)
    _, width, height, _ = _read_bmp_header(header)
    return width, height


def display_bmp(canvas: Canvas, path: PathLike, xoffset: int, yoffset: int) -> None:
    """Draw a 24-bit BMP file onto the canvas with its lower-left corner at the offset.

    Each pixel sets the canvas pen colour before it is plotted, so the pen is
    left at the colour of the last pixel. Pixels off the canvas are skipped.
    """
    data = Path(path).read_bytes()
    file_size, width, height, raw_size = _read_bmp_header(data)
    if width < 0 or height < 0:
        raise ImageFileError("BMP dimensions must not be negative")
    row_size = _bmp_row_size(width)
    if row_size * height != raw_size:
        raise ImageFileError("BMP pixel data size does not match its dimensions")
    if raw_size + BMP_HEADER_SIZE != file_size:
        raise ImageFileError("BMP file size field does not match its pixel data")
    if len(data) < BMP_HEADER_SIZE + raw_size:
        raise ImageFileError("BMP pixel data is truncated")
    if len(data) > BMP_HEADER_SIZE + raw_size:
        raise ImageFileError("BMP file has data past the end of the pixels")

    for y in range(height):
        row_start = BMP_HEADER_SIZE + y * row_size
        for x in range(width):
            at = row_start + 3 * x
            b, g, r = data[at], data[at + 1], data[at + 2]
            canvas.rgb_int(r, g, b)
            canvas.point(x + xoffset, y + yoffset)


def save_xwd(canvas: Canvas, path: PathLike) -> None:
    """Write the canvas as a 24-bit-depth, 32-bits-per-pixel XWD file."""
    width, height = canvas.width, canvas.height
    bytes_per_line = width * 4
    fields = (
        XWD_HEADER_SIZE,  # header size
        7,  # file version
        2,  # ZPixmap format
        24,  # depth
        width,
        height,
        0,  # x offset
        0,  # byte order: least significant first
        32,  # bitmap unit
        0,  # bitmap bit order
        32,  # bitmap pad
        32,  # bits per pixel
        bytes_per_line,
        5,  # visual class
        0x00FF0000,  # red mask
        0x0000FF00,  # green mask
        0x000000FF,  # blue mask
        24,  # bits per rgb
        0,  # colormap entries
        0,  # colour structures
        width,  # window width
        height,  # window height
        0,  # window x
        0,  # window y
        0,  # window border width
    )
    header = struct.pack(f">{_XWD_FIELD_COUNT}i", *fields) + bytes(_XWD_NAME_PADDING)

    body = bytearray()
    for screen_row in range(height):
        y = height - 1 - screen_row
        for x in range(width):
            body += struct.pack("<I", canvas.get_pixel(x, y))

    with open(path, "wb") as stream:
        stream.write(header)
        stream.write(body)


def xwd_dimensions(path: PathLike) -> tuple[int, int]:
    """Return (width, height) stored in an XWD file's header."""
    with open(path, "rb") as stream:
        header = stream.read(6 * 4)
    if len(header) < 6 * 4:
        raise ImageFileError("XWD header is truncated")
    width, height = struct.unpack_from(">2i", header, 4 * 4)
    return width, height


def load_xwd(canvas: Canvas, path: PathLike, x: float, y: float) -> None:
    """Copy an XWD image onto the canvas with its lower-left corner at (x, y).

    The part of the image above the top of the canvas or right of its right
    edge is cut off. The canvas pen colour is left unchanged.
    """
    ix, iy = int(x), int(y)
    data = Path(path).read_bytes()
    if len(data) < XWD_HEADER_SIZE:
        raise ImageFileError("XWD header is truncated")
    fields = struct.unpack_from(f">{_XWD_FIELD_COUNT}i", data, 0)
    image_width, image_height = fields[4], fields[5]
    byte_order, bits_per_pixel, bytes_per_line = fields[7], fields[11], fields[12]
    if image_width < 0 or image_height < 0 or bytes_per_line < 0:
        raise ImageFileError("XWD dimensions must not be negative")
    if bits_per_pixel != 32:
        raise ImageFileError("only 32 bits per pixel XWD images are supported")
    start = _XWD_FIELD_COUNT * 4 + _XWD_NAME_PADDING
    pixels = data[start : start + bytes_per_line * image_height]
    if len(pixels) < bytes_per_line * image_height:
        raise ImageFileError("XWD pixel data is truncated")
    pixel_format = "<I" if byte_order == 0 else ">I"

    room_above = canvas.height - iy
    if image_height <= room_above:
        transfer_height = image_height
        src_y = 0
        dest_y = canvas.height - iy - image_height
    else:
        transfer_height = room_above
        src_y = image_height - room_above
        dest_y = 0
    transfer_width = min(image_width, canvas.width - ix)

    saved_color = canvas.color
    try:
        for row in range(max(transfer_height, 0)):
            line_start = (src_y + row) * bytes_per_line
            canvas_y = canvas.height - 1 - (dest_y + row)
            for col in range(max(transfer_width, 0)):
                (value,) = struct.unpack_from(pixel_format, pixels, line_start + 4 * col)
                canvas.color = value & 0xFFFFFF
                canvas.point(ix + col, canvas_y)
    finally:
        canvas.color = saved_color