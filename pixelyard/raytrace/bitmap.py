"""24-bit top-down BMP images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_HEADER_SIZE = _FILE_HEADER.size + _INFO_HEADER.size
_BMP_MAGIC = ord("M") << 8 | ord("B")
_BYTES_PER_PIXEL = 3


@dataclass(frozen=True)
class Pixel:
    """One 24-bit pixel."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel value {channel} is outside 0-255")


class Bitmap:
    """A width x height image addressed as bitmap[x, y], y = 0 at the top."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"bad bitmap size {width}x{height}")
        self.width = width
        self.height = height
        row_bytes = _BYTES_PER_PIXEL * width
        self.stride = row_bytes + (-row_bytes) % 4
        self.pixels = [Pixel() for _ in range(width * height)]

    def _index(self, position: tuple[int, int]) -> int:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel {position} is outside the bitmap")
        return y * self.width + x

    def __getitem__(self, position: tuple[int, int]) -> Pixel:
        return self.pixels[self._index(position)]

    def __setitem__(
        self, position: tuple[int, int], pixel: Pixel | tuple[int, int, int]
    ) -> None:
        if not isinstance(pixel, Pixel):
            pixel = Pixel(*pixel)
        self.pixels[self._index(position)] = pixel

    @property
    def file_size(self) -> int:
        return _HEADER_SIZE + self.stride * self.height

    def to_bytes(self) -> bytes:
        """The complete BMP file."""
        file_header = _FILE_HEADER.pack(_BMP_MAGIC, self.file_size, 0, 0, _HEADER_SIZE)
        info_header = _INFO_HEADER.pack(
            _INFO_HEADER.size, self.width, -self.height, 1, 24, 0, 0, 0, 0, 0, 0
        )
        padding = bytes(self.stride - _BYTES_PER_PIXEL * self.width)
        rows = []
        for y in range(self.height):
            row = self.pixels[y * self.width:(y + 1) * self.width]
            rows.append(b"".join(bytes((p.b, p.g, p.r)) for p in row) + padding)
        return file_header + info_header + b"".join(rows)

    def write(self, path: str | Path) -> None:
        """Write the image to path as a BMP file."""
        Path(path).write_bytes(self.to_bytes())