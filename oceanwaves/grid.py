"""A regular triangulated grid and line/grid intersection searches."""

from __future__ import annotations

import math

from oceanwaves.geometry import line_intersects_triangle, make_triangle, normal
from oceanwaves.primitives import Triangle, TriangleMesh, Vector3

GridIndex = tuple[int, int, int]


def _format_point(p: Vector3) -> str:
    return f"{p.x} {p.y} {p.z}"


class Grid:
    """A flat rectangular grid of cells, each split into two triangles.

    The grid is centred on the origin in its own frame. Vertices are stored
    with x varying fastest; each cell ``(ix, iy)`` holds faces ``k = 0`` and
    ``k = 1`` at face index ``2 * (nx * iy + ix) + k``.
    """

    def __init__(self, size: tuple[float, float], cell_count: tuple[int, int]) -> None:
        size_x, size_y = (float(s) for s in size)
        nx, ny = (int(n) for n in cell_count)
        if nx < 1 or ny < 1:
            raise ValueError(f"cell counts must be positive: {(nx, ny)}")

        self._size = (size_x, size_y)
        self._cell_count = (nx, ny)
        self.center = Vector3(0.0, 0.0, 0.0)
        self._mesh = TriangleMesh()
        self._normals: list[Vector3] = []

        lx = size_x / nx
        ly = size_y / ny
        for iy in range(ny + 1):
            py = iy * ly - size_y / 2.0
            for ix in range(nx + 1):
                px = ix * lx - size_x / 2.0
                self._mesh.add_vertex(Vector3(px, py, 0.0))

        for iy in range(ny):
            for ix in range(nx):
                v0 = iy * (nx + 1) + ix
                v1 = v0 + 1
                v2 = (iy + 1) * (nx + 1) + ix + 1
                v3 = v2 - 1
                self._mesh.add_face(v0, v1, v2)
                self._mesh.add_face(v0, v2, v3)
                p0, p1, p2, p3 = (self._mesh.point(v) for v in (v0, v1, v2, v3))
                self._normals.append(normal(p0, p1, p2))
                self._normals.append(normal(p0, p2, p3))

    def copy(self) -> Grid:
        """An independent copy of the grid, its mesh and its normals."""
        other = Grid.__new__(Grid)
        other._size = self._size
        other._cell_count = self._cell_count
        other.center = Vector3(0.0, 0.0, 0.0)
        other._mesh = self._mesh.copy()
        other._normals = list(self._normals)
        return other

    @property
    def mesh(self) -> TriangleMesh:
        return self._mesh

    @property
    def size(self) -> tuple[float, float]:
        return self._size

    @property
    def cell_count(self) -> tuple[int, int]:
        return self._cell_count

    @property
    def vertex_count(self) -> int:
        return self._mesh.number_of_vertices

    @property
    def face_count(self) -> int:
        return self._mesh.number_of_faces

    def _face_index(self, ix: int, iy: int, k: int) -> int:
        return 2 * (self._cell_count[0] * iy + ix) + k

    def point(self, index: int) -> Vector3:
        return self._mesh.point(index)

    def set_point(self, index: int, point: Vector3) -> None:
        self._mesh.set_point(index, point)

    def triangle(self, ix: int, iy: int, k: int) -> Triangle:
        return make_triangle(self._mesh, self._face_index(ix, iy, k))

    def face(self, ix: int, iy: int, k: int) -> int:
        return self._face_index(ix, iy, k)

    def normal(self, ix: int, iy: int, k: int) -> Vector3:
        return self._normals[self._face_index(ix, iy, k)]

    def normal_at(self, index: int) -> Vector3:
        return self._normals[index]

    def recalculate_normals(self) -> None:
        """Recompute the face normals after the vertices have moved."""
        self._normals = [normal(*make_triangle(self._mesh, f)) for f in self._mesh.faces]

    def debug_print(self) -> None:
        """Print the centre, vertices and faces of the grid."""
        print("Center")
        print(f"c0:  {_format_point(self.center)}")
        print("Vertices")
        for v in self._mesh.vertices:
            print(f"{v}: {_format_point(self._mesh.point(v))}")
        print("Faces")
        for f in self._mesh.faces:
            tri = make_triangle(self._mesh, f)
            print(f"{f}: " + " ".join(_format_point(p) for p in tri))


def find_intersection_index(grid: Grid, x: float, y: float) -> GridIndex | None:
    """Cell and triangle ``(ix, iy, k)`` of the grid above or below ``(x, y)``.

    Returns None when the point lies outside the grid bounds.
    """
    nx, ny = grid.cell_count
    size_x, size_y = grid.size
    lx = size_x / nx
    ly = size_y / ny
    lower_x = -size_x / 2.0 + grid.center.x
    upper_x = size_x / 2.0 + grid.center.x
    lower_y = -size_y / 2.0 + grid.center.y
    upper_y = size_y / 2.0 + grid.center.y

    if x < lower_x or x > upper_x or y < lower_y or y > upper_y:
        return None

    ix = int(math.floor((x - lower_x) / lx))
    iy = int(math.floor((y - lower_y) / ly))

    x0 = ix * lx + lower_x
    y0 = iy * ly + lower_y
    m = ly / lx
    c = y0 - m * x0
    k = 1 if y > m * x + c else 0
    return ix, iy, k


def find_intersection_triangle(
    grid: Grid, origin: Vector3, direction: Vector3, index: GridIndex
) -> Vector3 | None:
    """Intersection of the line with the triangle at ``index``, or None."""
    p0, p1, p2 = grid.triangle(*index)
    return line_intersects_triangle(origin, direction, p0, p1, p2)


def _search_cell(
    grid: Grid, origin: Vector3, direction: Vector3, ix: int, iy: int, k: int
) -> tuple[int, Vector3 | None]:
    """Try triangle ``k`` then the other one; return the last k tried and hit."""
    hit = find_intersection_triangle(grid, origin, direction, (ix, iy, k))
    if hit is not None:
        return k, hit
    k = 1 - k if k in (0, 1) else 0
    if k == 0 and False:  # pragma: no cover
        pass
    return k, find_intersection_triangle(grid, origin, direction, (ix, iy, k))


def find_intersection_cell(
    grid: Grid, origin: Vector3, direction: Vector3, index: GridIndex
) -> tuple[GridIndex, Vector3] | None:
    """Search both triangles of the cell at ``index``.

    Returns the index of the triangle hit and the intersection point, or None.
    """
    ix, iy, k = index
    k, hit = _search_cell(grid, origin, direction, ix, iy, k)
    if hit is None:
        return None
    return (ix, iy, k), hit


def find_intersection_grid(
    grid: Grid, origin: Vector3, direction: Vector3, index: GridIndex
) -> tuple[GridIndex, Vector3] | None:
    """Search the grid for the line, in expanding shells about ``index``.

    Returns the index of the triangle hit and the intersection point, or None
    once every cell has been searched.
    """
    kx, ky, k = index
    k, hit = _search_cell(grid, origin, direction, kx, ky, k)
    if hit is not None:
        return (kx, ky, k), hit

    nx, ny = grid.cell_count
    kxmin, kxmax = 0, nx - 1
    kymin, kymax = 0, ny - 1
    kxm0 = kxp0 = kx
    kym0 = kyp0 = ky

    while True:
        expanded = False
        kxm = max(kxm0 - 1, kxmin)
        kxp = min(kxp0 + 1, kxmax)
        kym = max(kym0 - 1, kymin)
        kyp = min(kyp0 + 1, kymax)

        cells: list[tuple[int, int]] = []
        row0 = row1 = 0
        if kxm != kxm0:
            expanded = True
            row0 = 1
            cells.extend((kxm, j) for j in range(kym, kyp + 1))
        if kxp != kxp0:
            expanded = True
            row1 = 1
            cells.extend((kxp, j) for j in range(kym, kyp + 1))
        if kym != kym0:
            expanded = True
            cells.extend((i, kym) for i in range(kxm + row0, kxp - row1 + 1))
        if kyp != kyp0:
            expanded = True
            cells.extend((i, kyp) for i in range(kxm + row0, kxp - row1 + 1))

        for ix, iy in cells:
            k, hit = _search_cell(grid, origin, direction, ix, iy, k)
            if hit is not None:
                return (ix, iy, k), hit

        if not expanded:
            return None
        kxm0, kxp0, kym0, kyp0 = kxm, kxp, kym, kyp