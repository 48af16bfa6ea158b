# bmpfilter

Apply simple image filters to 24-bit uncompressed BMP files.

| Flag | Filter    | Effect                                                       |
|------|-----------|--------------------------------------------------------------|
| `-g` | grayscale | each pixel becomes the rounded mean of its three channels    |
| `-r` | reflect   | mirrors every row horizontally                               |
| `-b` | blur      | box blur over the 3x3 neighbourhood, clipped at the borders  |
| `-e` | edges     | Sobel operator per channel, capped at 255                    |
| `-a` | all       | grayscale followed by reflect                                |

## Installation

```
pip install .
```

## Command line

```
bmpfilter -g input.bmp output.bmp
```

At most one filter flag may be given, together with the input and the
output path. Without a flag the image is copied unchanged. The filter
runs on one worker thread per available CPU. After writing the output
the command prints how long filtering and writing took, for example
`Edit function took 0.012345 seconds to execute`.

Exit statuses:

| Status | Meaning                                           |
|--------|---------------------------------------------------|
| 0      | success                                           |
| 1      | unknown flag (`Invalid filter.`)                  |
| 2      | more than one flag (`Only one filter allowed.`)   |
| 3      | not exactly two file names (usage message)       |
| 4      | the input file could not be opened                |
| 5      | the output file could not be created              |
| 6      | the input is truncated or has a negative width    |

## Library use

```python
from bmpfilter import bmp, filters

bitmap = bmp.load("input.bmp")
bitmap.pixels = filters.blur(bitmap.pixels)
bmp.save(bitmap, "output.bmp")
```

- `bmpfilter.bmp` reads and writes bitmaps: `load`, `save`,
  `read_bitmap`, `write_bitmap`, the `Bitmap`, `BitmapFileHeader`,
  `BitmapInfoHeader` and `Pixel` types (channels in blue, green, red
  order), and `row_padding(width)`. Headers are written back exactly as
  they were read.
- `bmpfilter.filters` has `grayscale`, `reflect`, `blur` and `edges`.
  Each takes a list of pixel rows and returns a new one; the input is
  not changed. `apply_filter(kind, image)` chooses one by `FilterKind`
  or by its flag letter and raises `ValueError` for an unknown one.
- `bmpfilter.parallel` offers the same functions with an extra
  `workers` argument and shares the rows out between worker threads;
  the result equals the single-threaded one.
- `bmpfilter.workers` provides `default_workers()`, `split_rows(height,
  workers)` and `map_rows(func, height, workers)`.
- `bmpfilter.cli` provides `parse_args`, `run` and `main`.

## Limitations

The reader does not check the signature, bit depth or compression
fields: any file is read as 24-bit uncompressed pixel data that starts
directly after the two headers. Palettes, other bit depths and
compressed images are not supported.

## Running the tests

```
pip install .[test]
pytest
```