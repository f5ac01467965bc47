# src/geometry/world.py
import logging
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode
from typing import Optional, List
from core.aabb import AABB
from core.ray import Ray

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects. Queries scan the list linearly until
    build_bvh() is called, after which they go through the BVH root.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.bvh_root = None  # top-level BVH node

    def add(self, obj: Hittable):
        self.objects.append(obj)
        # The tree no longer covers every object.
        self.bvh_root = None

    def clear(self):
        self.objects.clear()
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 0.0, rng=None):
        if len(self.objects) == 0:
            self.bvh_root = None
            return
        # The builder reorders its input; keep insertion order for linear scans.
        self.bvh_root = BVHNode(list(self.objects), 0, len(self.objects), time0, time1, rng=rng)
        logger.debug("Built BVH over %d objects", len(self.objects))

    def hit_linear(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)
        return self.hit_linear(ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> Optional[AABB]:
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box
