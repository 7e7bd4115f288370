"""Pixel sampling: turn a grid of RGBA pixels into weighted color samples.

AIDEV-NOTE: Samples are emitted in row-major order (row 0 left-to-right, then
row 1, ...). The clusterer relies on this order for its first-encountered
tie-break, so every source must walk pixels the same way.
"""

from typing import Iterator, Protocol, Sequence

import numpy as np
from PIL import Image

from models import Sample


class PixelSource(Protocol):
    """Anything exposing a width x height grid of 8-bit RGBA pixels."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def get_rgba(self, x: int, y: int) -> "tuple[int, int, int, int]": ...


class PixelGrid:
    """In-memory pixel source built from rows of RGB or RGBA tuples.

    RGB tuples are treated as fully opaque.
    """

    def __init__(self, rows: "Sequence[Sequence[Sequence[int]]]"):
        self._rows = [[_as_rgba(pixel) for pixel in row] for row in rows]
        widths = {len(row) for row in self._rows}
        if len(widths) > 1:
            raise ValueError("All rows of a pixel grid must have the same width")
        self._width = widths.pop() if widths else 0

    @classmethod
    def from_flat(cls, pixels: "Sequence[Sequence[int]]", width: int) -> "PixelGrid":
        """Build a grid from a flat row-major pixel list."""
        if width <= 0:
            return cls([])
        if len(pixels) % width:
            raise ValueError(
                f"{len(pixels)} pixels cannot be split into rows of {width}"
            )
        return cls([pixels[i : i + width] for i in range(0, len(pixels), width)])

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        # A grid of empty rows still has zero area
        return len(self._rows) if self._width else 0

    def get_rgba(self, x: int, y: int) -> "tuple[int, int, int, int]":
        return self._rows[y][x]


class ImagePixelSource:
    """Pixel source backed by a Pillow image.

    The image is converted to straight-alpha RGBA once and read through a
    numpy array of shape (height, width, 4).
    """

    def __init__(self, image: Image.Image):
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        width, height = rgba.size
        if width == 0 or height == 0:
            self._pixels = np.zeros((height, width, 4), dtype=np.uint8)
        else:
            self._pixels = np.asarray(rgba, dtype=np.uint8)

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    def get_rgba(self, x: int, y: int) -> "tuple[int, int, int, int]":
        r, g, b, a = self._pixels[y, x].tolist()
        return (r, g, b, a)

    def samples(self) -> Iterator[Sample]:
        """Row-major samples read straight from the array."""
        flat = self._pixels.reshape(-1, 4).tolist()
        for r, g, b, a in flat:
            yield Sample((r, g, b), a / 255.0)


def to_sample(rgba: "Sequence[int]") -> Sample:
    """Convert one straight-alpha RGBA pixel into a Sample."""
    r, g, b, a = rgba
    return Sample((int(r), int(g), int(b)), int(a) / 255.0)


def sample_pixels(source: PixelSource) -> Iterator[Sample]:
    """Yield one Sample per pixel of ``source`` in row-major order.

    Args:
        source: Pixel grid to walk

    Returns:
        Iterator of exactly width * height samples. Zero-area grids yield
        nothing. Fully transparent pixels still yield a weight-0 sample.
    """
    if isinstance(source, ImagePixelSource):
        yield from source.samples()
        return

    for y in range(source.height):
        for x in range(source.width):
            yield to_sample(source.get_rgba(x, y))


def _as_rgba(pixel: "Sequence[int]") -> "tuple[int, int, int, int]":
    if len(pixel) == 3:
        r, g, b = pixel
        return (int(r), int(g), int(b), 255)
    r, g, b, a = pixel
    return (int(r), int(g), int(b), int(a))
