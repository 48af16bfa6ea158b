"""Reading and writing 24-bit uncompressed BMP files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO, NamedTuple, Union

PIXEL_SIZE = 3

_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_PIXEL = struct.Struct("<BBB")

StrPath = Union[str, "PathLike[str]"]


class Pixel(NamedTuple):
    """A colour stored in BMP order: blue, green, red."""

    blue: int
    green: int
    red: int


Image = list[list[Pixel]]


@dataclass
class BitmapFileHeader:
    """Type, size and layout of a BMP file."""

    signature: int = 0x4D42
    size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    off_bits: int = 54

    @classmethod
    def from_bytes(cls, data: bytes) -> BitmapFileHeader:
        if len(data) < _FILE_HEADER.size:
            raise ValueError("truncated BMP file header")
        return cls(*_FILE_HEADER.unpack_from(data))

    def to_bytes(self) -> bytes:
        return _FILE_HEADER.pack(
            self.signature, self.size, self.reserved1, self.reserved2, self.off_bits
        )


@dataclass
class BitmapInfoHeader:
    """Dimensions and colour format of a BMP image."""

    size: int = 40
    width: int = 0
    height: int = 0
    planes: int = 1
    bit_count: int = 24
    compression: int = 0
    size_image: int = 0
    x_pels_per_meter: int = 0
    y_pels_per_meter: int = 0
    clr_used: int = 0
    clr_important: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> BitmapInfoHeader:
        if len(data) < _INFO_HEADER.size:
            raise ValueError("truncated BMP info header")
        return cls(*_INFO_HEADER.unpack_from(data))

    def to_bytes(self) -> bytes:
        return _INFO_HEADER.pack(
            self.size,
            self.width,
            self.height,
            self.planes,
            self.bit_count,
            self.compression,
            self.size_image,
            self.x_pels_per_meter,
            self.y_pels_per_meter,
            self.clr_used,
            self.clr_important,
        )


@dataclass
class Bitmap:
    """Headers plus pixel rows of a BMP image, rows in file order."""

    file_header: BitmapFileHeader
    info_header: BitmapInfoHeader
    pixels: Image

    def __post_init__(self) -> None:
        if self.info_header.width < 0:
            raise ValueError("negative image width")
        if len(self.pixels) != self.height:
            raise ValueError("pixel rows do not match the header height")
        if any(len(row) != self.width for row in self.pixels):
            raise ValueError("pixel columns do not match the header width")

    @property
    def width(self) -> int:
        return self.info_header.width

    @property
    def height(self) -> int:
        return abs(self.info_header.height)


def row_padding(width: int) -> int:
    """Number of zero bytes that end each scanline of the given width."""
    return (4 - (width * PIXEL_SIZE) % 4) % 4


def read_bitmap(stream: BinaryIO) -> Bitmap:
    """Read a bitmap whose pixel rows follow its two headers directly."""
    file_header = BitmapFileHeader.from_bytes(stream.read(_FILE_HEADER.size))
    info_header = BitmapInfoHeader.from_bytes(stream.read(_INFO_HEADER.size))
    width = info_header.width
    if width < 0:
        raise ValueError("negative image width")
    row_bytes = width * PIXEL_SIZE
    padding = row_padding(width)

    pixels: Image = []
    for _ in range(abs(info_header.height)):
        data = stream.read(row_bytes)
        if len(data) < row_bytes:
            raise ValueError("truncated BMP pixel data")
        pixels.append([Pixel._make(values) for values in _PIXEL.iter_unpack(data)])
        stream.read(padding)
    return Bitmap(file_header, info_header, pixels)


def write_bitmap(bitmap: Bitmap, stream: BinaryIO) -> None:
    """Write headers unchanged, then each row followed by its padding."""
    stream.write(bitmap.file_header.to_bytes())
    stream.write(bitmap.info_header.to_bytes())
    pad = bytes(row_padding(bitmap.width))
    for row in bitmap.pixels:
        stream.write(bytes(channel for pixel in row for channel in pixel) + pad)


def load(path: StrPath) -> Bitmap:
    """Read a bitmap from a file."""
    with open(path, "rb") as stream:
        return read_bitmap(stream)


def save(bitmap: Bitmap, path: StrPath) -> None:
    """Write a bitmap to a file, replacing it."""
    with open(path, "wb") as stream:
        write_bitmap(bitmap, stream)