import math

import pytest

from oceanwaves.geometry import (
    AABBTree,
    face_normal,
    horizontal_intercept,
    line_intersects_triangle,
    make_aabb_tree,
    make_triangle,
    midpoint,
    normal,
    normalize,
    ray_intersects_triangle,
    search_mesh,
    triangle_area,
    triangle_centroid,
    triangle_normal,
)
from oceanwaves.primitives import Triangle, TriangleMesh, Vector2, Vector3

P0 = Vector3(0.0, 0.0, 0.0)
P1 = Vector3(1.0, 0.0, 0.0)
P2 = Vector3(0.0, 1.0, 0.0)


def _wavy_mesh(n=6, size=4.0):
    mesh = TriangleMesh()
    step = size / n
    for iy in range(n + 1):
        for ix in range(n + 1):
            x = ix * step - size / 2
            y = iy * step - size / 2
            mesh.add_vertex(Vector3(x, y, 0.3 * math.sin(x) * math.cos(y)))
    for iy in range(n):
        for ix in range(n):
            a = iy * (n + 1) + ix
            b = a + 1
            c = a + n + 2
            d = a + n + 1
            mesh.add_face(a, b, c)
            mesh.add_face(a, c, d)
    return mesh


def test_triangle_area_unit_right_triangle():
    assert triangle_area(P0, P1, P2) == pytest.approx(0.5)


def test_triangle_area_invariants():
    a, b, c = Vector3(1, 2, 3), Vector3(-2, 0.5, 1), Vector3(4, -1, 2)
    area = triangle_area(a, b, c)
    assert triangle_area(b, c, a) == pytest.approx(area)
    assert triangle_area(c, b, a) == pytest.approx(area)
    assert triangle_area(a * 2, b * 2, c * 2) == pytest.approx(4 * area)
    assert triangle_area(a, a, c) == 0.0


def test_centroid_and_midpoint():
    a, b, c = Vector3(1, 2, 3), Vector3(-2, 0.5, 1), Vector3(4, -1, 2)
    g = triangle_centroid(a, b, c)
    shifted = triangle_centroid(a + P1, b + P1, c + P1)
    assert (shifted - g - P1).length() < 1e-12
    assert triangle_centroid(a, a, a) == a
    m = midpoint(a, b)
    assert (m - a).length() == pytest.approx((m - b).length())
    assert midpoint(a, a) == a


def test_normalize():
    v = Vector3(3.0, -4.0, 12.0)
    n = normalize(v)
    assert n.length() == pytest.approx(1.0)
    assert v.cross(n).length() == pytest.approx(0.0, abs=1e-12)
    assert n.dot(v) > 0
    w = normalize(Vector2(-2.0, 5.0))
    assert w.length() == pytest.approx(1.0)
    assert normalize(Vector3(0.0, 0.0, 0.0)) == Vector3(0.0, 0.0, 0.0)
    assert normalize(Vector2(0.0, 0.0)) == Vector2(0.0, 0.0)


def test_normal_counter_clockwise_xy():
    assert normal(P0, P1, P2) == Vector3(0.0, 0.0, 1.0)
    assert normal(P0, P2, P1) == -normal(P0, P1, P2)


def test_normal_is_unit_and_perpendicular():
    a, b, c = Vector3(1, 2, 3), Vector3(-2, 0.5, 1), Vector3(4, -1, 2)
    n = normal(a, b, c)
    assert n.length() == pytest.approx(1.0)
    assert n.dot(b - a) == pytest.approx(0.0, abs=1e-12)
    assert n.dot(c - a) == pytest.approx(0.0, abs=1e-12)
    assert triangle_normal(Triangle(a, b, c)) == n


def test_triangle_normal_collinear_is_zero():
    tri = Triangle(P0, P1, P1 * 2.0)
    assert triangle_normal(tri) == Vector3(0.0, 0.0, 0.0)


def test_face_normal_and_make_triangle():
    mesh = _wavy_mesh()
    for face in mesh.faces:
        tri = make_triangle(mesh, face)
        assert list(tri) == [mesh.point(v) for v in mesh.face_vertices(face)]
        assert face_normal(mesh, face) == normal(*tri)
        assert face_normal(mesh, face).z > 0


def test_horizontal_intercept_lies_on_low_high_line():
    high, mid, low = Vector3(2, 3, 5), Vector3(0, 0, 2), Vector3(-1, 1, -1)
    p = horizontal_intercept(high, mid, low)
    assert p.z == mid.z
    assert (p - low).cross(high - low).length() == pytest.approx(0.0, abs=1e-12)


def test_horizontal_intercept_flat_returns_low():
    high, mid, low = Vector3(2, 3, 1), Vector3(0, 0, 1), Vector3(-1, 1, 1)
    assert horizontal_intercept(high, mid, low) == low


def test_ray_intersects_triangle_hit_and_miss():
    tri = Triangle(P0, P1, P2)
    origin = Vector3(0.25, 0.25, 5.0)
    down = Vector3(0.0, 0.0, -1.0)
    hit = ray_intersects_triangle(origin, down, tri)
    assert hit is not None
    assert (hit.x, hit.y) == (origin.x, origin.y)
    assert hit.z == pytest.approx(0.0, abs=1e-12)
    assert ray_intersects_triangle(origin, -down, tri) is None
    assert ray_intersects_triangle(Vector3(2.0, 2.0, 5.0), down, tri) is None
    assert ray_intersects_triangle(origin, Vector3(1.0, 0.0, 0.0), tri) is None


def test_line_intersects_in_both_directions():
    origin = Vector3(0.25, 0.25, 5.0)
    up = Vector3(0.0, 0.0, 1.0)
    hit = line_intersects_triangle(origin, up, P0, P1, P2)
    assert hit is not None
    assert hit == line_intersects_triangle(origin, -up, P0, P1, P2)
    assert line_intersects_triangle(origin, Vector3(0.0, 1.0, 0.0), P0, P1, P2) is None


def test_aabb_tree_matches_brute_force():
    mesh = _wavy_mesh()
    tree = make_aabb_tree(mesh)
    assert isinstance(tree, AABBTree)
    assert len(tree) == mesh.number_of_faces
    down = Vector3(0.0, 0.0, -1.0)
    for x, y in [(0.1, 0.2), (-1.3, 0.7), (1.9, -1.9), (0.0, 0.0)]:
        origin = Vector3(x, y, 10.0)
        hit = tree.first_intersection(origin, down)
        assert hit is not None
        brute = [
            line_intersects_triangle(origin, down, *make_triangle(mesh, f))
            for f in mesh.faces
        ]
        heights = [p.z for p in brute if p is not None]
        assert hit.z == pytest.approx(max(heights))
        assert (hit.x, hit.y) == pytest.approx((x, y))


def test_aabb_tree_miss_and_bad_direction():
    tree = make_aabb_tree(_wavy_mesh())
    assert tree.first_intersection(Vector3(0.1, 0.1, 10.0), Vector3(0, 0, 1)) is None
    assert tree.first_intersection(Vector3(50, 50, 10), Vector3(0, 0, -1)) is None
    with pytest.raises(ValueError):
        tree.first_intersection(Vector3(0, 0, 0), Vector3(0, 0, 0))


def test_search_mesh_searches_both_directions():
    mesh = _wavy_mesh()
    tree = make_aabb_tree(mesh)
    origin = Vector3(0.3, -0.4, 10.0)
    up = Vector3(0.0, 0.0, 1.0)
    from_tree = search_mesh(tree, origin, up)
    from_mesh = search_mesh(mesh, origin, up)
    assert from_tree is not None
    assert from_tree == from_mesh
    assert from_tree == tree.first_intersection(origin, -up)
    assert search_mesh(tree, Vector3(50, 50, 0), up) is None


def test_empty_mesh_tree():
    tree = make_aabb_tree(TriangleMesh())
    assert len(tree) == 0
    assert search_mesh(tree, P0, Vector3(0, 0, 1)) is None