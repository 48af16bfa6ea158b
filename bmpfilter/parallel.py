"""Row-parallel versions of the image filters, run on worker threads."""

from __future__ import annotations

from collections.abc import Callable

from bmpfilter import filters
from bmpfilter.bmp import Image, Pixel
from bmpfilter.filters import FilterKind
from bmpfilter.workers import map_rows


def _rowwise(
    step: Callable[[Image], Image], image: Image, workers: int | None
) -> Image:
    """Apply a filter that looks at one row at a time, one row per task."""
    return map_rows(lambda i: step([image[i]])[0], len(image), workers)


def _windowed(
    step: Callable[[Image], Image], image: Image, workers: int | None
) -> Image:
    """Apply a 3x3 neighbourhood filter, giving each row its own band of rows.

    The band holds the row and its in-bounds neighbours above and below, so
    the filter sees exactly the pixels it would see on the whole image.
    """

    def row(i: int) -> list[Pixel]:
        start = max(i - 1, 0)
        band = image[start : i + 2]
        return step(band)[i - start]

    return map_rows(row, len(image), workers)


def grayscale(image: Image, workers: int | None = None) -> Image:
    """Grayscale conversion with rows shared out between workers."""
    return _rowwise(filters.grayscale, image, workers)


def reflect(image: Image, workers: int | None = None) -> Image:
    """Horizontal reflection with rows shared out between workers."""
    return _rowwise(filters.reflect, image, workers)


def blur(image: Image, workers: int | None = None) -> Image:
    """Box blur with rows shared out between workers."""
    return _windowed(filters.blur, image, workers)


def edges(image: Image, workers: int | None = None) -> Image:
    """Sobel edge detection with rows shared out between workers."""
    return _windowed(filters.edges, image, workers)


_PIPELINES: dict[FilterKind, tuple[Callable[[Image, int | None], Image], ...]] = {
    FilterKind.BLUR: (blur,),
    FilterKind.EDGES: (edges,),
    FilterKind.GRAYSCALE: (grayscale,),
    FilterKind.REFLECT: (reflect,),
    FilterKind.ALL: (grayscale, reflect),
}


def apply_filter(
    kind: FilterKind | str, image: Image, workers: int | None = None
) -> Image:
    """Apply the filter named by a FilterKind or its flag letter, in parallel."""
    try:
        selected = FilterKind(kind)
    except ValueError:
        raise ValueError(f"invalid filter: {kind!r}") from None
    for step in _PIPELINES[selected]:
        image = step(image, workers)
    return image