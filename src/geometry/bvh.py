# src/geometry/bvh.py
import logging
import math
import random
from typing import Optional
from core.aabb import AABB
from core.errors import SceneConfigurationError
from core.ray import Ray

logger = logging.getLogger(__name__)

def _box_of(obj, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        logger.error("No bounding box in BVH node constructor for %r", obj)
        raise SceneConfigurationError(f"Object without a bounding box cannot be placed in a BVH: {obj!r}")
    return box

class BVHNode:
    """
    Binary bounding volume hierarchy node.

    Built by splitting objects[start:end] at the median after a stable sort
    of the bounding boxes' minimum along a randomly chosen axis. Leaves are
    the scene objects themselves; a span of one puts the same object on
    both sides.

    Every leaf remembers its position in the list the tree was built from.
    When two leaves are hit at exactly the same t, the one that came first
    wins, which is also what a linear scan of that list returns.

    Args:
        objects: Objects to organize. The sub-range [start, end) is reordered in place.
        start, end: Half-open index range to build over.
        time0, time1: Time interval the boxes must cover (moving objects).
        rng: Random source for the axis choice; the `random` module when omitted.
        order: id() of each object -> insertion index, shared by child nodes.
            Computed from `objects` at the root.

    Raises:
        SceneConfigurationError: if the range is empty or an object has no bounding box.
    """
    def __init__(self, objects: list, start: int, end: int,
                 time0: float = 0.0, time1: float = 0.0, rng=None, order=None):
        if rng is None:
            rng = random
        if order is None:
            order = {}
            for index, obj in enumerate(objects):
                order.setdefault(id(obj), index)
        object_span = end - start
        if object_span <= 0:
            logger.error("BVH node requested for empty range [%d, %d)", start, end)
            raise SceneConfigurationError(f"Cannot build a BVH node over an empty range [{start}, {end})")

        axis = rng.randint(0, 2)

        def key(obj):
            return _box_of(obj, time0, time1).minimum[axis]

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            a, b = objects[start], objects[start + 1]
            # Ties keep input order, matching the stable sort below.
            if key(b) < key(a):
                a, b = b, a
            self.left, self.right = a, b
        else:
            # Sorting only the sub-range; Python's sort is stable.
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng, order)
            self.right = BVHNode(objects, mid, end, time0, time1, rng, order)

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))
        # Insertion index of leaf children; None for subtrees.
        self.left_index = None if isinstance(self.left, BVHNode) else order.get(id(self.left))
        self.right_index = None if isinstance(self.right, BVHNode) else order.get(id(self.right))

    def hit(self, ray: Ray, t_min: float, t_max: float):
        return self._hit_indexed(ray, t_min, t_max)[0]

    def _hit_child(self, child, index, ray: Ray, t_min: float, t_max: float):
        if isinstance(child, BVHNode):
            return child._hit_indexed(ray, t_min, t_max)
        return child.hit(ray, t_min, t_max), index

    def _hit_indexed(self, ray: Ray, t_min: float, t_max: float):
        """Closest hit in this subtree and the insertion index of the leaf that produced it."""
        if not self.box.hit(ray, t_min, t_max):
            return None, None

        hit_left, index_left = self._hit_child(self.left, self.left_index, ray, t_min, t_max)
        if self.right is self.left:
            # Single-object leaf; a second query would redraw stochastic surfaces.
            return hit_left, index_left

        # The right branch only needs to look as far as the left hit, inclusive,
        # so an equal-t hit from an earlier inserted object can still win.
        if hit_left is not None:
            t_max = math.nextafter(hit_left.t, math.inf)

        hit_right, index_right = self._hit_child(self.right, self.right_index, ray, t_min, t_max)

        if hit_right is None:
            return hit_left, index_left
        if hit_left is None or hit_right.t < hit_left.t:
            return hit_right, index_right
        if hit_right.t == hit_left.t and index_right is not None and \
                (index_left is None or index_right < index_left):
            return hit_right, index_right
        return hit_left, index_left

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> Optional[AABB]:
        return self.box

    def depth(self) -> int:
        """Height of the tree below this node (leaves count as 1)."""
        left = self.left.depth() if isinstance(self.left, BVHNode) else 1
        right = self.right.depth() if isinstance(self.right, BVHNode) else 1
        return 1 + max(left, right)
