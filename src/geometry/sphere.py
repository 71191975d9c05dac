# geometry/sphere.py
import math
from typing import Optional
from core.vector import Point
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center and radius.
    A sphere with a non-positive radius is never hit.
    """
    def __init__(self, center: Point, radius: float):
        self.center = center
        self.radius = float(radius)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.radius <= 0:
            return None

        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        p = ray.at(root)
        outward_normal = (p - self.center) / self.radius
        return HitRecord.from_outward_normal(ray, root, p, outward_normal)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
