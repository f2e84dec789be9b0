import random

import pytest

from pixelyard.noise.image import (
    RGBA,
    Image32,
    compose_color,
    create_circle_gradient,
    create_corner_gradient,
)

START = (10, 20, 30)
END = (200, 100, 50)


class _FixedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        return next(self._values)


def _rng():
    return _FixedRng(START + END)


def _channels(image):
    return (
        [pixel.r for pixel in image.pixels],
        [pixel.g for pixel in image.pixels],
        [pixel.b for pixel in image.pixels],
    )


def _assert_between_colors(image):
    for values, lo, hi in zip(_channels(image), START, END):
        low, high = min(lo, hi), max(lo, hi)
        assert min(values) >= low - 1
        assert max(values) <= high


def test_packed_puts_red_lowest():
    assert RGBA(1, 2, 3, 4).packed() == 0x04030201


def test_image_sizes():
    image = Image32(3, 2)
    assert image.pixel_count == 6
    assert image.pixel_bytes == 24
    assert len(image.pixels) == 6


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Image32(-1, 4)


def test_compose_color_weights_and_zero_alpha():
    result = compose_color(RGBA(100, 0, 40, 9), RGBA(0, 200, 40, 9), 0.5, 0.5)
    assert result == RGBA(50, 100, 40, 0)


def test_compose_color_full_weight_returns_color():
    color = RGBA(7, 8, 9, 0)
    assert compose_color(color, RGBA(255, 255, 255), 1.0, 0.0) == color


def test_circle_gradient_centre_and_corner():
    image = Image32(4, 4)
    create_circle_gradient(image, _rng())
    assert image.pixels[2 * 4 + 2] == RGBA(*END, 0)
    assert image.pixels[0] == RGBA(*START, 0)


def test_circle_gradient_stays_between_colors():
    image = Image32(7, 5)
    create_circle_gradient(image, _rng())
    assert len(image.pixels) == 35
    _assert_between_colors(image)
    assert all(pixel.a == 0 for pixel in image.pixels)


def test_corner_gradient_stays_between_colors_and_is_monotonic():
    image = Image32(6, 4)
    create_corner_gradient(image, _rng())
    _assert_between_colors(image)
    reds = [image.pixels[i].r for i in range(6)]
    assert reds == sorted(reds)


def test_gradients_repeat_with_same_seed():
    first, second = Image32(5, 5), Image32(5, 5)
    create_corner_gradient(first, random.Random(9))
    create_corner_gradient(second, random.Random(9))
    assert first.pixels == second.pixels