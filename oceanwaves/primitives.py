"""Basic linear-geometry types and a triangle surface mesh."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector2:
    """A two-dimensional vector."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vector2:
        return Vector2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vector2:
        return Vector2(self.x / scale, self.y / scale)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def squared_length(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.squared_length())


@dataclass(frozen=True, slots=True)
class Vector3:
    """A three-dimensional vector, also used for points."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vector3:
        return Vector3(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vector3:
        return Vector3(self.x / scale, self.y / scale, self.z / scale)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def squared_length(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.squared_length())


Point3 = Vector3


@dataclass(frozen=True, slots=True)
class Triangle:
    """A triangle given by its three vertices."""

    p0: Vector3
    p1: Vector3
    p2: Vector3

    def __iter__(self) -> Iterator[Vector3]:
        yield self.p0
        yield self.p1
        yield self.p2

    def __getitem__(self, i: int) -> Vector3:
        return (self.p0, self.p1, self.p2)[i]

    def __len__(self) -> int:
        return 3


class TriangleMesh:
    """A surface mesh of triangular faces over an indexed vertex list."""

    def __init__(self) -> None:
        self._points: list[Vector3] = []
        self._faces: list[tuple[int, int, int]] = []

    @property
    def number_of_vertices(self) -> int:
        return len(self._points)

    @property
    def number_of_faces(self) -> int:
        return len(self._faces)

    @property
    def vertices(self) -> range:
        return range(len(self._points))

    @property
    def faces(self) -> range:
        return range(len(self._faces))

    def add_vertex(self, point: Vector3) -> int:
        """Append a vertex and return its index."""
        self._points.append(point)
        return len(self._points) - 1

    def add_face(self, v0: int, v1: int, v2: int) -> int:
        """Append a triangular face over existing vertices; return its index."""
        vertices = (v0, v1, v2)
        for v in vertices:
            if not 0 <= v < len(self._points):
                raise IndexError(f"vertex index out of range: {v}")
        if len(set(vertices)) != 3:
            raise ValueError(f"face vertices must be distinct: {vertices}")
        self._faces.append(vertices)
        return len(self._faces) - 1

    def point(self, vertex: int) -> Vector3:
        return self._points[vertex]

    def set_point(self, vertex: int, point: Vector3) -> None:
        self._points[vertex] = point

    def face_vertices(self, face: int) -> tuple[int, int, int]:
        """The vertex indexes of a face, in the order they were added."""
        return self._faces[face]

    def copy(self) -> TriangleMesh:
        other = TriangleMesh()
        other._points = list(self._points)
        other._faces = list(self._faces)
        return other