"""Image filters: grayscale, horizontal reflection, box blur and Sobel edges."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from enum import Enum

from bmpfilter.bmp import Image, Pixel

_MAX_CHANNEL = 255

_SOBEL_X = ((-1, 0, 1), (-2, 0, 2), (-1, 0, 1))
_SOBEL_Y = ((-1, -2, -1), (0, 0, 0), (1, 2, 1))


class FilterKind(str, Enum):
    """Filters selectable by their one-letter flag."""

    BLUR = "b"
    EDGES = "e"
    GRAYSCALE = "g"
    REFLECT = "r"
    ALL = "a"


def _round_half_up(value: float) -> int:
    """Round a non-negative value, ties away from zero."""
    return math.floor(value + 0.5)


def _neighbours(image: Image, i: int, j: int) -> Iterator[tuple[int, int, Pixel]]:
    """Yield (row offset, column offset, pixel) for the 3x3 box inside the image."""
    height = len(image)
    for di in (-1, 0, 1):
        row_index = i + di
        if not 0 <= row_index < height:
            continue
        row = image[row_index]
        for dj in (-1, 0, 1):
            col_index = j + dj
            if 0 <= col_index < len(row):
                yield di, dj, row[col_index]


def grayscale(image: Image) -> Image:
    """Replace each pixel by the rounded mean of its three channels."""
    def gray(pixel: Pixel) -> Pixel:
        avg = _round_half_up(sum(pixel) / 3)
        return Pixel(avg, avg, avg)

    return [[gray(pixel) for pixel in row] for row in image]


def reflect(image: Image) -> Image:
    """Mirror each row left to right."""
    return [row[::-1] for row in image]


def _blurred(image: Image, i: int, j: int) -> Pixel:
    box = [pixel for _, _, pixel in _neighbours(image, i, j)]
    count = len(box)
    return Pixel(*(_round_half_up(sum(channel) / count) for channel in zip(*box)))


def blur(image: Image) -> Image:
    """Average each pixel with its in-bounds 3x3 neighbourhood."""
    return [
        [_blurred(image, i, j) for j in range(len(row))]
        for i, row in enumerate(image)
    ]


def _edge(image: Image, i: int, j: int) -> Pixel:
    gx = [0, 0, 0]
    gy = [0, 0, 0]
    for di, dj, pixel in _neighbours(image, i, j):
        wx = _SOBEL_X[di + 1][dj + 1]
        wy = _SOBEL_Y[di + 1][dj + 1]
        for channel, value in enumerate(pixel):
            gx[channel] += value * wx
            gy[channel] += value * wy
    return Pixel(
        *(
            min(_MAX_CHANNEL, _round_half_up(math.sqrt(x * x + y * y)))
            for x, y in zip(gx, gy)
        )
    )


def edges(image: Image) -> Image:
    """Sobel gradient magnitude per channel, capped at 255; outside pixels count as absent."""
    return [
        [_edge(image, i, j) for j in range(len(row))]
        for i, row in enumerate(image)
    ]


_PIPELINES: dict[FilterKind, tuple[Callable[[Image], Image], ...]] = {
    FilterKind.BLUR: (blur,),
    FilterKind.EDGES: (edges,),
    FilterKind.GRAYSCALE: (grayscale,),
    FilterKind.REFLECT: (reflect,),
    FilterKind.ALL: (grayscale, reflect),
}


def apply_filter(kind: FilterKind | str, image: Image) -> Image:
    """Apply the filter named by a FilterKind or its flag letter."""
    try:
        selected = FilterKind(kind)
    except ValueError:
        raise ValueError(f"invalid filter: {kind!r}") from None
    for step in _PIPELINES[selected]:
        image = step(image)
    return image