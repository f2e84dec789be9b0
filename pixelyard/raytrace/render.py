"""Rendering the random-spheres scene to a BMP file."""

from __future__ import annotations

import argparse
import math
import random
import sys

from pixelyard.raytrace.bitmap import Bitmap, Pixel
from pixelyard.raytrace.tracer import (
    Camera,
    Dielectric,
    HitList,
    Lambertian,
    Metal,
    Sphere,
    get_color,
)
from pixelyard.raytrace.vec import Vec3

LOOK_FROM = Vec3(3.0, 3.0, 2.0)
LOOK_AT = Vec3(0.0, 0.0, -1.0)
V_UP = Vec3(0.0, 1.0, 0.0)
FIELD_OF_VIEW = 20.0
APERTURE = 2.0


def build_scene(rng: random.Random | None = None) -> HitList:
    """A ground sphere, three large spheres and a field of small random ones."""
    rng = rng if rng is not None else random.Random()
    spheres = [
        Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Vec3(0.5, 0.5, 0.5))),
        Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)),
        Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vec3(0.4, 0.2, 0.1))),
        Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)),
    ]
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            x = a + 0.9 * rng.random()
            z = b + 0.9 * rng.random()
            center = Vec3(x, 0.2, z)
            if (center - Vec3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            c, d, e, f, g, h = (rng.random() for _ in range(6))
            if choose_mat < 0.8:
                material = Lambertian(Vec3(g * h, c * d, e * f))
            elif choose_mat < 0.95:
                material = Metal(
                    Vec3(0.5 * (1.0 + g), 0.5 * (1.0 + h), 0.5 * (1.0 + c)), 0.5 * d
                )
            else:
                material = Dielectric(1.5)
            spheres.append(Sphere(center, 0.2, material))
    return HitList(spheres)


def _to_channel(value: float) -> int:
    return min(255, max(0, int(255.99 * math.sqrt(value))))


def render(width: int, height: int, samples: int, rng: random.Random | None = None) -> Bitmap:
    """Trace the scene into a width x height bitmap with samples rays per pixel."""
    if width <= 0 or height <= 0 or samples <= 0:
        raise ValueError("width, height and samples must be positive")
    rng = rng if rng is not None else random.Random()
    world = build_scene(rng)
    camera = Camera(
        LOOK_FROM, LOOK_AT, V_UP, FIELD_OF_VIEW, width / height, APERTURE,
        (LOOK_FROM - LOOK_AT).length(), rng,
    )
    bitmap = Bitmap(width, height)
    for y in range(height - 1, -1, -1):
        for x in range(width):
            total = Vec3()
            for _ in range(samples):
                u = (x + rng.random()) / width
                v = (y + rng.random()) / height
                total = total + get_color(camera.get_ray(u, v), world, 0, rng)
            col = total / samples
            bitmap[x, height - 1 - y] = Pixel(
                _to_channel(col.x), _to_channel(col.y), _to_channel(col.z)
            )
    return bitmap


def main(argv: list[str] | None = None) -> int:
    """Render the scene and write it as a BMP file."""
    parser = argparse.ArgumentParser(description="Path-trace a field of spheres.")
    parser.add_argument("--width", type=int, default=200)
    parser.add_argument("--height", type=int, default=100)
    parser.add_argument("--samples", type=int, default=50)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default="test.bmp")
    args = parser.parse_args(argv)
    try:
        bitmap = render(args.width, args.height, args.samples, random.Random(args.seed))
    except ValueError as err:
        parser.error(str(err))
    bitmap.write(args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())