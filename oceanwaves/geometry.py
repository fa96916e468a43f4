"""Properties of simple geometric objects and line/mesh intersection."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field

from oceanwaves.primitives import Triangle, TriangleMesh, Vector2, Vector3

_EPS = sys.float_info.epsilon
_ZERO = Vector3(0.0, 0.0, 0.0)


def triangle_area(p0: Vector3, p1: Vector3, p2: Vector3) -> float:
    """Area of the triangle with the given vertices."""
    return 0.5 * (p1 - p0).cross(p2 - p0).length()


def triangle_centroid(p0: Vector3, p1: Vector3, p2: Vector3) -> Vector3:
    return Vector3(
        (p0.x + p1.x + p2.x) / 3.0,
        (p0.y + p1.y + p2.y) / 3.0,
        (p0.z + p1.z + p2.z) / 3.0,
    )


def midpoint(p0: Vector3, p1: Vector3) -> Vector3:
    return Vector3((p0.x + p1.x) / 2.0, (p0.y + p1.y) / 2.0, (p0.z + p1.z) / 2.0)


def normalize(v: Vector2 | Vector3) -> Vector2 | Vector3:
    """Scale ``v`` to unit length; a zero vector is returned unchanged."""
    if all(c == 0.0 for c in v):
        return v
    return v / v.length()


def normal(p0: Vector3, p1: Vector3, p2: Vector3) -> Vector3:
    """Unit normal of the plane through three points (zero if degenerate)."""
    return normalize((p1 - p0).cross(p2 - p0))


def triangle_normal(tri: Triangle) -> Vector3:
    """Unit normal of a triangle; zero for a triangle of collinear points."""
    n = (tri.p1 - tri.p0).cross(tri.p2 - tri.p0)
    if n == _ZERO:
        return _ZERO
    return n / n.length()


def face_normal(mesh: TriangleMesh, face: int) -> Vector3:
    return normal(*make_triangle(mesh, face))


def horizontal_intercept(high: Vector3, mid: Vector3, low: Vector3) -> Vector3:
    """Point on the line from ``low`` to ``high`` at the height of ``mid``.

    If ``high`` and ``low`` are at the same height any point on the line
    qualifies and the one at ``low`` is chosen.
    """
    t = 0.0
    div = high.z - low.z
    if abs(div) > _EPS:
        t = (mid.z - low.z) / div
    return Vector3(
        low.x + t * (high.x - low.x),
        low.y + t * (high.y - low.y),
        mid.z,
    )


def _moller_trumbore(
    origin: Vector3, ray: Vector3, p0: Vector3, p1: Vector3, p2: Vector3
) -> float | None:
    """Line parameter of the intersection with a triangle, or None."""
    e1 = p1 - p0
    e2 = p2 - p0
    h = ray.cross(e2)
    a = e1.dot(h)
    if -_EPS < a < _EPS:
        return None
    f = 1.0 / a
    s = origin - p0
    u = f * s.dot(h)
    if u < 0.0 or u > 1.0:
        return None
    q = s.cross(e1)
    v = f * ray.dot(q)
    if v < 0.0 or u + v > 1.0:
        return None
    return f * e2.dot(q)


def ray_intersects_triangle(
    origin: Vector3, direction: Vector3, tri: Triangle
) -> Vector3 | None:
    """Intersection of a ray with a triangle, or None if it misses."""
    t = _moller_trumbore(origin, direction, tri.p0, tri.p1, tri.p2)
    if t is None or t <= _EPS:
        return None
    return origin + direction * t


def line_intersects_triangle(
    origin: Vector3, direction: Vector3, p0: Vector3, p1: Vector3, p2: Vector3
) -> Vector3 | None:
    """Intersection of a line (both directions) with a triangle, or None."""
    t = _moller_trumbore(origin, direction, p0, p1, p2)
    if t is None:
        return None
    return origin + direction * t


def make_triangle(mesh: TriangleMesh, face: int) -> Triangle:
    v0, v1, v2 = mesh.face_vertices(face)
    return Triangle(mesh.point(v0), mesh.point(v1), mesh.point(v2))


@dataclass
class _Node:
    lo: tuple[float, float, float]
    hi: tuple[float, float, float]
    faces: list[int] = field(default_factory=list)
    left: _Node | None = None
    right: _Node | None = None


def _ray_box_entry(
    origin: Vector3,
    direction: Vector3,
    lo: tuple[float, float, float],
    hi: tuple[float, float, float],
) -> float | None:
    tmin, tmax = 0.0, math.inf
    for o, d, low, high in zip(origin, direction, lo, hi):
        if d == 0.0:
            if o < low or o > high:
                return None
            continue
        t1 = (low - o) / d
        t2 = (high - o) / d
        if t1 > t2:
            t1, t2 = t2, t1
        tmin = max(tmin, t1)
        tmax = min(tmax, t2)
        if tmin > tmax:
            return None
    return tmin


class AABBTree:
    """Bounding-volume hierarchy over the faces of a triangle mesh."""

    _LEAF_SIZE = 4

    def __init__(self, mesh: TriangleMesh) -> None:
        self._triangles = [make_triangle(mesh, f) for f in mesh.faces]
        faces = list(range(len(self._triangles)))
        self._root = self._build(faces) if faces else None

    def __len__(self) -> int:
        return len(self._triangles)

    def _bounds(self, faces: list[int]) -> tuple[tuple, tuple]:
        pts = [p for f in faces for p in self._triangles[f]]
        lo = tuple(min(c) for c in zip(*pts))
        hi = tuple(max(c) for c in zip(*pts))
        return lo, hi

    def _build(self, faces: list[int]) -> _Node:
        lo, hi = self._bounds(faces)
        if len(faces) <= self._LEAF_SIZE:
            return _Node(lo, hi, faces=faces)
        axis = max(range(3), key=lambda i: hi[i] - lo[i])
        faces = sorted(faces, key=lambda f: sum(tuple(p)[axis] for p in self._triangles[f]))
        half = len(faces) // 2
        return _Node(lo, hi, left=self._build(faces[:half]), right=self._build(faces[half:]))

    def first_intersection(self, origin: Vector3, direction: Vector3) -> Vector3 | None:
        """Intersection of the ray closest to its origin, or None."""
        if direction == _ZERO:
            raise ValueError("ray direction must be non-zero")
        if self._root is None:
            return None
        best_t = math.inf
        stack = [self._root]
        while stack:
            node = stack.pop()
            entry = _ray_box_entry(origin, direction, node.lo, node.hi)
            if entry is None or entry > best_t:
                continue
            if node.left is None:
                for f in node.faces:
                    tri = self._triangles[f]
                    t = _moller_trumbore(origin, direction, tri.p0, tri.p1, tri.p2)
                    if t is not None and 0.0 <= t < best_t:
                        best_t = t
            else:
                stack.append(node.left)
                stack.append(node.right)
        if math.isinf(best_t):
            return None
        return origin + direction * best_t


def make_aabb_tree(mesh: TriangleMesh) -> AABBTree:
    return AABBTree(mesh)


def search_mesh(
    mesh_or_tree: TriangleMesh | AABBTree, origin: Vector3, direction: Vector3
) -> Vector3 | None:
    """Intersect the line through ``origin`` with a mesh, searching both ways.

    Passing a prebuilt tree avoids rebuilding it for every query.
    """
    tree = mesh_or_tree if isinstance(mesh_or_tree, AABBTree) else AABBTree(mesh_or_tree)
    hit = tree.first_intersection(origin, direction)
    if hit is None:
        hit = tree.first_intersection(origin, -direction)
    return hit