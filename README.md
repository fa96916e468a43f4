# oceanwaves

A single deep-water linear (Airy) wave sampled on a regular grid,
together with the geometry tools used to sample a wave surface:
vectors, triangles, a triangle surface mesh, normals, ray and line
intersection with triangles, a bounding-volume tree for mesh searches,
and a triangulated grid with a search that finds where a line meets it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `oceanwaves.primitives`: `Vector2`, `Vector3` (also used for points,
  with `Point3` as an alias), `Triangle` and `TriangleMesh`. Vectors are
  immutable and support `+`, `-`, scalar `*` and `/`, `dot`, `cross`
  (3D), `squared_length` and `length`.
- `oceanwaves.geometry`: `triangle_area`, `triangle_centroid`, `midpoint`,
  `normalize` (a zero vector is returned unchanged), `normal`,
  `triangle_normal`, `face_normal`, `horizontal_intercept`,
  `ray_intersects_triangle`, `line_intersects_triangle`, `make_triangle`,
  `AABBTree`, `make_aabb_tree` and `search_mesh`. The intersection
  functions return the intersection point or `None`. `search_mesh` takes
  a mesh or a prebuilt `AABBTree` and searches the line in both
  directions.
- `oceanwaves.algorithm`: `sort_indexes` (indexes ordered by value,
  largest first) and `unordered_unique`, which returns a `UniqueResult`
  holding the unique values in first-seen order with their first
  indexes, the inverse map and the counts.
- `oceanwaves.constants`: `GRAVITY` (-9.8, z-up), `G`, `WATER_DENSITY`
  and `WATER_KINEMATIC_VISCOSITY`.
- `oceanwaves.grid`: `Grid`, a flat rectangular patch centred on the
  origin, each cell split into two triangles, and the search functions
  `find_intersection_index`, `find_intersection_triangle`,
  `find_intersection_cell` and `find_intersection_grid`. The grid
  search tries the starting cell, then expanding shells of cells about
  it, and returns the triangle index `(ix, iy, k)` and point it hit, or
  `None`.
- `oceanwaves.wave_simulation`: the abstract `WaveField` (elevation and
  pressure at points) and `WaveSimulation` (values on a grid)
  interfaces, and the `DisplacementAndDeriv` result tuple.
- `oceanwaves.linear_regular`: `LinearRegularWaveSimulation`, which
  implements both interfaces for the wave
  `eta = A cos(k (x cos(theta) + y sin(theta)) - w t)` with the
  deep-water dispersion relation `k = w^2 / 9.81`.

## Example

```python
from oceanwaves.linear_regular import LinearRegularWaveSimulation

sim = LinearRegularWaveSimulation(lx=100.0, ly=100.0, nx=64, ny=64, lz=10.0, nz=4)
sim.amplitude = 0.5
sim.period = 8.0
sim.set_direction(1.0, 0.0)
sim.set_time(2.5)

eta = sim.elevation(3.0, -1.0)   # elevation at a point
h = sim.elevation_grid()         # elevations at all grid samples, x varying fastest
p = sim.pressure_grid(0)         # pressure at depth index 0 (see sim.depths)
```

Grid values are flat arrays of `nx * ny` entries with the x index
varying fastest. Samples start at `(-lx / 2, -ly / 2)` and are spaced
`lx / nx` and `ly / ny` apart. Pressure is sampled at `nz` depths
spread logarithmically down to `-lz`, the last being the surface.

Notes on `LinearRegularWaveSimulation`:

- The horizontal displacement and its derivatives are zero everywhere.
- `set_wind_velocity` and `set_steepness` only record their values
  (`wind_velocity`, `steepness`); they do not change the wave.
- `displacement_and_deriv_grid` returns `dhdx` and `dhdy` exchanged.
- `use_vectorised` chooses between an array computation and a
  per-sample loop; both give the same values.

```python
from oceanwaves.grid import Grid, find_intersection_grid, find_intersection_index
from oceanwaves.primitives import Vector3

grid = Grid((10.0, 10.0), (4, 4))
index = find_intersection_index(grid, 1.2, -3.4)   # (ix, iy, k) or None
hit = find_intersection_grid(grid, Vector3(1.2, -3.4, 5.0), Vector3(0.0, 0.0, -1.0), index)
```

## What it does not do

The package offers one wave model, the single regular linear wave.
It has no wind-driven random or spectral wave simulations, no
rendering, and no command-line program; it is used as a library.