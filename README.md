# graphkit

A small, dependency-free graphics toolkit. It draws into an in-memory
raster whose origin is the lower-left corner, with y growing upwards.

- `graphkit.canvas` – the `Canvas` class: a pixel buffer holding packed
  `0xRRGGBB` values and a current pen colour. A new canvas is white with
  a black pen. It offers points, clipped and unclipped lines,
  rectangle outlines and filled rectangles, polygon outlines and
  even–odd filled polygons (at most 1000 points; extra points are
  ignored with a warning), horizontal runs and pixel read-back.
- `graphkit.colors` – conversions between float RGB in `[0, 1]`, 8-bit
  RGB in `[0, 255]` and packed 24-bit pixel values.
- `graphkit.drawing` – circles, filled circles, triangles and circular
  sectors drawn onto a `Canvas`.
- `graphkit.imagefiles` – saving a canvas as a 24-bit BMP or a 32-bit
  XWD file, reading the dimensions stored in such files, and drawing
  them back onto a canvas. Malformed files raise `ImageFileError`.

## Installation

```
pip install .
```

Python 3.10 or newer is required; nothing outside the standard library
is needed.

## Drawing on a canvas

```python
from graphkit.canvas import Canvas
from graphkit import drawing, imagefiles

canvas = Canvas(400, 300)
canvas.rgb(0.0, 0.0, 0.2)
canvas.clear()

canvas.rgb(1.0, 0.5, 0.0)
canvas.fill_polygon([50, 200, 120], [40, 60, 220])

canvas.rgb(1.0, 1.0, 1.0)
canvas.line(-50, -50, 450, 350)          # clipped to the canvas
drawing.circle(canvas, 300, 150, 60)
drawing.fill_sector(canvas, 100, 150, 40, 0.0, 1.5)

print(hex(canvas.get_pixel(300, 210)))   # raises IndexError off the canvas
print(canvas.get_pixel_safe(-1, 0))      # None off the canvas

imagefiles.save_bmp(canvas, "picture.bmp")
print(imagefiles.bmp_dimensions("picture.bmp"))   # (400, 300)
```

`Canvas.point` and `Canvas.line` return `False` when nothing lands on
the canvas. `drawing.sector_points` returns the vertices of a sector
without drawing, and raises `ValueError` when the sweep is negative or
larger than a full turn.

## Colours

```python
from graphkit import colors

colors.rgb_to_rgb_int(1.0, 0.5, 0.0)      # (255, 128, 0)
colors.rgb_int_to_pixel(255, 128, 0)      # 0xFF8000
colors.pixel_to_rgb_int(0xFF8000)         # (255, 128, 0)
```

## Image files

`save_xwd` and `load_xwd` write and read 32-bits-per-pixel XWD images;
`load_xwd` cuts off the part of the image that falls above or to the
right of the canvas and leaves the pen colour unchanged. `display_bmp`
checks the BMP header and sizes before drawing, and leaves the pen at
the colour of the last pixel drawn.

## What it does not do

graphkit only draws into memory and writes image files. It opens no
window, reads no mouse or keyboard input, and installs no command-line
program. It has no transformation matrices, no polygon clipping
routines and no 3D mesh loading or rendering.

## Running the tests

```
pip install ".[test]"
pytest
```