"""32-bit RGBA images and colour gradients."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

_U32_MAX = 0xFFFFFFFF


def _to_u8(value: float) -> int:
    return min(255, max(0, int(value)))


@dataclass
class RGBA:
    """One pixel, 8 bits per channel."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def packed(self) -> int:
        """The pixel as a 32-bit value with red in the low byte."""
        return (self.a << 24) | (self.b << 16) | (self.g << 8) | self.r


class Image32:
    """A width x height image of RGBA pixels stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if not (0 <= width <= _U32_MAX and 0 <= height <= _U32_MAX):
            raise ValueError(f"bad image size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [RGBA() for _ in range(width * height)]

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def pixel_bytes(self) -> int:
        return self.pixel_count * 4


def compose_color(a_color: RGBA, b_color: RGBA, a_weight: float, b_weight: float) -> RGBA:
    """Weighted sum of two colours; alpha is always 0."""
    return RGBA(
        _to_u8(a_color.r * a_weight + b_color.r * b_weight),
        _to_u8(a_color.g * a_weight + b_color.g * b_weight),
        _to_u8(a_color.b * a_weight + b_color.b * b_weight),
        0,
    )


def _random_colors(rng) -> tuple[RGBA, RGBA]:
    start = RGBA(rng.randrange(256), rng.randrange(256), rng.randrange(256), 0)
    end = RGBA(rng.randrange(256), rng.randrange(256), rng.randrange(256), 0)
    return start, end


def create_circle_gradient(image: Image32, rng: random.Random | None = None) -> None:
    """Fill with a radial gradient: end colour at the centre, start colour at the corners."""
    start, end = _random_colors(rng or random)
    half_w = image.width // 2
    half_h = image.height // 2
    max_dist = math.sqrt(half_w * half_w + half_h * half_h)
    for r in range(image.height):
        for c in range(image.width):
            dist = math.sqrt((half_w - c) ** 2 + (half_h - r) ** 2)
            percent = dist / max_dist if max_dist else 0.0
            image.pixels[r * image.width + c] = compose_color(
                start, end, percent, 1.0 - percent
            )


def create_corner_gradient(image: Image32, rng: random.Random | None = None) -> None:
    """Fill with a diagonal gradient from the top left to the bottom right."""
    start, end = _random_colors(rng or random)
    total = image.height + image.width
    for r in range(image.height):
        for c in range(image.width):
            percent = (r + c + 1) / total
            image.pixels[r * image.width + c] = compose_color(
                start, end, 1.0 - percent, percent
            )