"""Writing 32-bit images as top-down BMP files."""

from __future__ import annotations

import argparse
import random
import struct
import sys
from pathlib import Path

from pixelyard.noise.image import Image32, create_circle_gradient

_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_HEADER_SIZE = _FILE_HEADER.size + _INFO_HEADER.size
_BMP_MAGIC = 0x4D42


def encode_bmp(image: Image32) -> bytes:
    """The whole BMP file for image, rows stored top to bottom."""
    pixel_bytes = image.pixel_bytes
    file_header = _FILE_HEADER.pack(
        _BMP_MAGIC, _HEADER_SIZE + pixel_bytes, 0, 0, _HEADER_SIZE
    )
    info_header = _INFO_HEADER.pack(
        _INFO_HEADER.size, image.width, -image.height, 1, 32, 0, pixel_bytes, 0, 0, 0, 0
    )
    pixels = b"".join(struct.pack("<I", p.packed()) for p in image.pixels)
    return file_header + info_header + pixels


def write_bmp(path: str | Path, image: Image32) -> None:
    """Write image to path as a BMP file."""
    Path(path).write_bytes(encode_bmp(image))


def main(argv: list[str] | None = None) -> int:
    """Render a 100x100 circle gradient to a BMP file."""
    parser = argparse.ArgumentParser(description="Write a random gradient image.")
    parser.add_argument("--output", default="img/test.bmp", help="file to write")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    image = Image32(100, 100)
    create_circle_gradient(image, random.Random(args.seed))
    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    try:
        write_bmp(output, image)
    except OSError as err:
        print(f'ERROR: Cannot open file "{output}": {err}', file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())