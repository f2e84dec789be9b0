"""Rays, spheres, materials and a thin-lens camera for path tracing."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional, Protocol

from pixelyard.raytrace.vec import Vec3

MAX_DEPTH = 50
T_MIN = 0.001
_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY = Vec3(0.5, 0.7, 1.0)
_BLACK = Vec3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Ray:
    """A half-line from origin along direction."""

    origin: Vec3 = Vec3()
    direction: Vec3 = Vec3()

    def at(self, t: float) -> Vec3:
        """The point at parameter t."""
        return self.origin + self.direction * t


class Material(Protocol):
    def scatter(
        self, ray: Ray, rec: HitRecord, rng: random.Random | None = None
    ) -> Optional[tuple[Vec3, Ray]]:
        ...


@dataclass(frozen=True)
class HitRecord:
    """Where a ray met a surface."""

    t: float
    p: Vec3
    normal: Vec3
    material: Material


def _rng(rng: random.Random | None):
    return rng if rng is not None else random


def random_in_unit_sphere(rng: random.Random | None = None) -> Vec3:
    """A random point inside the unit sphere."""
    rng = _rng(rng)
    while True:
        p = Vec3(rng.random(), rng.random(), rng.random()) * 2.0 - _WHITE
        if p.length_sq() <= 1.0:
            return p


def random_in_unit_disk(rng: random.Random | None = None) -> Vec3:
    """A random point inside the unit disk in the z = 0 plane."""
    rng = _rng(rng)
    while True:
        p = Vec3(rng.random(), rng.random(), 0.0) * 2.0 - Vec3(1.0, 1.0, 0.0)
        if p.length_sq() <= 1.0:
            return p


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror v about the surface with normal n."""
    return v - n * (v.dot(n) * 2.0)


def refract(v: Vec3, n: Vec3, ni_over_nt: float) -> Vec3 | None:
    """The refracted direction, or None on total internal reflection."""
    uv = v.normalized()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant <= 0.0:
        return None
    return (uv - n * dt) * ni_over_nt - n * math.sqrt(discriminant)


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


@dataclass
class Sphere:
    center: Vec3
    radius: float
    material: Material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """The nearest hit with t strictly between t_min and t_max."""
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - a * c
        if discriminant <= 0:
            return None
        root = math.sqrt(discriminant)
        for t in ((-b - root) / a, (-b + root) / a):
            if t_min < t < t_max:
                p = ray.at(t)
                return HitRecord(t, p, (p - self.center) / self.radius, self.material)
        return None


@dataclass
class HitList:
    entities: list = field(default_factory=list)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """The closest hit among all entities."""
        closest = None
        limit = t_max
        for entity in self.entities:
            rec = entity.hit(ray, t_min, limit)
            if rec is not None:
                closest = rec
                limit = rec.t
        return closest


class Camera:
    """A positionable camera with depth of field."""

    def __init__(
        self,
        look_from: Vec3,
        look_at: Vec3,
        v_up: Vec3,
        v_fov: float,
        aspect_ratio: float,
        aperture: float,
        focus_dist: float,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng
        self.lens_radius = aperture / 2.0
        theta = math.radians(v_fov)
        half_height = math.tan(theta / 2.0)
        half_width = aspect_ratio * half_height
        self.origin = look_from
        self.w = (look_from - look_at).normalized()
        self.u = v_up.cross(self.w).normalized()
        self.v = self.w.cross(self.u)
        self.lower_left = (
            self.origin
            - self.u * (half_width * focus_dist)
            - self.v * (half_height * focus_dist)
            - self.w * focus_dist
        )
        self.hor = self.u * (2.0 * half_width * focus_dist)
        self.ver = self.v * (2.0 * half_height * focus_dist)

    def get_ray(self, s: float, t: float) -> Ray:
        """A ray through the viewport point (s, t), both in 0-1."""
        rd = random_in_unit_disk(self.rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        return Ray(
            self.origin + offset,
            self.lower_left + self.hor * s + self.ver * t - self.origin - offset,
        )


@dataclass
class Lambertian:
    albedo: Vec3

    def scatter(
        self, ray: Ray, rec: HitRecord, rng: random.Random | None = None
    ) -> tuple[Vec3, Ray] | None:
        target = rec.p + rec.normal + random_in_unit_sphere(rng)
        return self.albedo, Ray(rec.p, target - rec.p)


@dataclass
class Metal:
    albedo: Vec3
    fuzz: float = 0.0

    def __post_init__(self) -> None:
        self.fuzz = min(self.fuzz, 1.0)

    def scatter(
        self, ray: Ray, rec: HitRecord, rng: random.Random | None = None
    ) -> tuple[Vec3, Ray] | None:
        reflected = reflect(ray.direction.normalized(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)
        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered
        return None


@dataclass
class Dielectric:
    ref_idx: float

    def scatter(
        self, ray: Ray, rec: HitRecord, rng: random.Random | None = None
    ) -> tuple[Vec3, Ray] | None:
        direction = ray.direction
        reflected = reflect(direction, rec.normal)
        along = direction.dot(rec.normal)
        if along > 0.0:
            outward = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * along / direction.length()
        else:
            outward = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -along / direction.length()
        refracted = refract(direction, outward, ni_over_nt)
        reflect_prob = 1.0 if refracted is None else schlick(cosine, self.ref_idx)
        if refracted is None or _rng(rng).random() < reflect_prob:
            return _WHITE, Ray(rec.p, reflected)
        return _WHITE, Ray(rec.p, refracted)


def get_color(ray: Ray, world, depth: int = 0, rng: random.Random | None = None) -> Vec3:
    """The colour seen along ray, bouncing up to MAX_DEPTH times."""
    factor = _WHITE
    while True:
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            t = (ray.direction.normalized().y + 1.0) * 0.5
            return factor * (_WHITE * (1.0 - t) + _SKY * t)
        if depth >= MAX_DEPTH:
            return _BLACK
        result = rec.material.scatter(ray, rec, rng)
        if result is None:
            return _BLACK
        attenuation, ray = result
        factor = factor * attenuation
        depth += 1