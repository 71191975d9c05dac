# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from typing import Iterator, Optional, List
from core.ray import Ray


class HittableList(Hittable):
    """
    An ordered list of Hittable objects that is itself Hittable: a ray hits
    the list wherever it hits its nearest member.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = []
        for obj in objects or []:
            self.add(obj)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Each member only searches up to the closest hit so far, so any hit
        # it reports is nearer than the current one.
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
