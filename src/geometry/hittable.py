# geometry/hittable.py
from typing import Optional
from core.vector import Point, Vector3
from core.ray import Ray


class HitRecord:
    """
    Records details of a ray-object intersection.

    The stored normal always points against the incoming ray; front_face tells
    whether that is the geometric outward normal (True) or its negation.
    """
    __slots__ = ("p", "normal", "t", "front_face")

    def __init__(self, p: Point, normal: Vector3, t: float, front_face: bool):
        self.p = p                    # Intersection point
        self.normal = normal          # Unit normal, opposing the ray
        self.t = t                    # Ray parameter at intersection
        self.front_face = front_face  # Whether the hit was on the outside

    @property
    def point(self) -> Point:
        return self.p

    @classmethod
    def from_outward_normal(cls, ray: Ray, t: float, p: Point,
                            outward_normal: Vector3) -> "HitRecord":
        """
        Builds a complete record from the geometric outward normal, flipping
        it when the ray arrives from inside the surface.
        """
        front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if front_face else -outward_normal
        return cls(p, normal, t, front_face)

    def __repr__(self) -> str:
        return (f"HitRecord(p={self.p!r}, normal={self.normal!r}, "
                f"t={self.t}, front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the intersection with the smallest t strictly inside
        (t_min, t_max), or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
