"""A single linear (Airy) wave in deep water, sampled on a regular grid."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from oceanwaves.wave_simulation import DisplacementAndDeriv, WaveField, WaveSimulation

_GRAVITY = 9.81


def _deep_water_wavenumber(omega: float) -> float:
    """Wavenumber from angular frequency using the deep-water dispersion relation."""
    return omega * omega / _GRAVITY


def _linspaced(n: int, low: float, high: float) -> np.ndarray:
    """Closed-interval linear spacing; a single sample takes the upper bound."""
    if n == 1:
        return np.array([high], dtype=float)
    return np.linspace(low, high, n)


def _pressure_depths(nz: int, lz: float) -> np.ndarray:
    """Pressure sample depths below the free surface, deepest first, ending at 0."""
    zr = np.zeros(nz)
    if nz > 1:
        ln_z = _linspaced(nz - 1, -math.log(lz), math.log(lz))
        zr[1:] = -np.exp(ln_z)
    return zr[::-1].copy()


class LinearRegularWaveSimulation(WaveSimulation, WaveField):
    """A regular wave ``eta = A cos(k (x cos(theta) + y sin(theta)) - w t)``.

    The grid has sides ``lx`` by ``ly`` with ``nx`` by ``ny`` samples spaced
    ``lx / nx`` and ``ly / ny`` apart, starting at ``(-lx / 2, -ly / 2)``.
    Gridded results have x varying fastest. Pressure is sampled at ``nz``
    depths spread logarithmically down to ``-lz``.
    """

    def __init__(
        self,
        lx: float,
        ly: float,
        nx: int,
        ny: int,
        lz: float = 0.0,
        nz: int = 1,
    ) -> None:
        self._lx = float(lx)
        self._ly = float(ly)
        self._lz = float(lz)
        self._nx = int(nx)
        self._ny = int(ny)
        self._nz = int(nz)

        self.use_vectorised = True
        self.amplitude = 1.0
        self.period = 1.0
        self._wave_angle = 0.0
        self._time = 0.0

        # Recorded for interface compatibility; they do not shape the wave.
        self._wind_velocity = (0.0, 0.0)
        self._steepness = 0.0

        # A regular linear wave moves the surface vertically only.
        self._horizontal_displacement = (0.0, 0.0)

        self._dx = self._lx / self._nx
        self._dy = self._ly / self._ny
        self._lx_min = -self._lx / 2.0
        self._ly_min = -self._ly / 2.0
        lx_max = self._lx / 2.0
        ly_max = self._ly / 2.0

        x = _linspaced(self._nx, self._lx_min, lx_max - self._dx)
        y = _linspaced(self._ny, self._ly_min, ly_max - self._dy)
        self._x_grid, self._y_grid = np.meshgrid(x, y, indexing="ij")
        self._z = _pressure_depths(self._nz, self._lz)

    # sizes and parameters

    @property
    def size_x(self) -> int:
        return self._nx

    @property
    def size_y(self) -> int:
        return self._ny

    @property
    def size_z(self) -> int:
        return self._nz

    @property
    def depths(self) -> np.ndarray:
        """The pressure sample depths, indexed by ``iz``."""
        return self._z.copy()

    @property
    def wave_angle(self) -> float:
        return self._wave_angle

    @property
    def time(self) -> float:
        return self._time

    @property
    def wind_velocity(self) -> tuple[float, float]:
        """The last wind velocity set; it does not affect the wave."""
        return self._wind_velocity

    @property
    def steepness(self) -> float:
        """The last steepness set; it does not affect the wave."""
        return self._steepness

    def set_direction(self, dir_x: float, dir_y: float) -> None:
        """Set the direction the wave travels in."""
        self._wave_angle = math.atan2(dir_y, dir_x)

    def set_wind_velocity(self, ux: float, uy: float) -> None:
        """Record the wind velocity; the regular wave is not wind driven."""
        self._wind_velocity = (float(ux), float(uy))

    def set_steepness(self, value: float) -> None:
        """Record the steepness; the regular wave does not use it."""
        self._steepness = float(value)

    def set_time(self, value: float) -> None:
        self._time = float(value)

    # helpers

    def _coeffs(self) -> tuple[float, float, float, float]:
        """Return ``(wt, k, cos(theta), sin(theta))`` for the current state."""
        w = 2.0 * math.pi / self.period
        return (
            w * self._time,
            _deep_water_wavenumber(w),
            math.cos(self._wave_angle),
            math.sin(self._wave_angle),
        )

    def _phase_grid(self) -> np.ndarray:
        """Wave phase at every grid sample, flattened with x fastest."""
        wt, k, cd, sd = self._coeffs()
        if self.use_vectorised:
            a = k * (self._x_grid * cd + self._y_grid * sd) - wt
            return a.ravel(order="F")
        phases = []
        for iy in range(self._ny):
            y = iy * self._dy + self._ly_min
            for ix in range(self._nx):
                x = ix * self._dx + self._lx_min
                phases.append(k * (x * cd + y * sd) - wt)
        return np.array(phases, dtype=float)

    def _grid_xy(self, ix: int, iy: int) -> tuple[float, float]:
        return ix * self._dx + self._lx_min, iy * self._dy + self._ly_min

    # interpolation interface

    def elevation(self, x: float, y: float) -> float:
        wt, k, cd, sd = self._coeffs()
        return self.amplitude * math.cos(k * (x * cd + y * sd) - wt)

    def elevations(self, x: Iterable[float], y: Iterable[float]) -> np.ndarray:
        """Elevations at paired points; stops at the shorter input."""
        return np.array([self.elevation(xi, yi) for xi, yi in zip(x, y)], dtype=float)

    def pressure(self, x: float, y: float, z: float) -> float:
        wt, k, cd, sd = self._coeffs()
        e = math.exp(k * z)
        return e * self.amplitude * math.cos(k * (x * cd + y * sd) - wt)

    def pressures(
        self, x: Iterable[float], y: Iterable[float], z: Iterable[float]
    ) -> np.ndarray:
        """Pressures at paired points; stops at the shortest input."""
        return np.array(
            [self.pressure(xi, yi, zi) for xi, yi, zi in zip(x, y, z)], dtype=float
        )

    # lookup interface - scalar

    def elevation_at(self, ix: int, iy: int) -> float:
        return self.elevation(*self._grid_xy(ix, iy))

    def displacement_at(self, ix: int, iy: int) -> tuple[float, float]:
        """Horizontal displacement at a grid sample, which is the same everywhere."""
        sx, sy = self._horizontal_displacement
        return sx, sy

    def pressure_at(self, ix: int, iy: int, iz: int) -> float:
        x, y = self._grid_xy(ix, iy)
        return self.pressure(x, y, float(self._z[iz]))

    # lookup interface - array

    def elevation_grid(self) -> np.ndarray:
        return self.amplitude * np.cos(self._phase_grid())

    def elevation_deriv_grid(self) -> tuple[np.ndarray, np.ndarray]:
        _, k, cd, sd = self._coeffs()
        sa = np.sin(self._phase_grid())
        dhdx = -(k * cd) * self.amplitude * sa
        dhdy = -(k * sd) * self.amplitude * sa
        return dhdx, dhdy

    def displacement_grid(self) -> tuple[np.ndarray, np.ndarray]:
        n = self._nx * self._ny
        sx, sy = self._horizontal_displacement
        return np.full(n, sx), np.full(n, sy)

    def displacement_deriv_grid(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        n = self._nx * self._ny
        return np.zeros(n), np.zeros(n), np.zeros(n)

    def displacement_and_deriv_grid(self) -> DisplacementAndDeriv:
        """All gridded quantities at once.

        The x and y elevation derivatives are exchanged in this result, as
        the surface renderer consuming it expects.
        """
        _, k, cd, sd = self._coeffs()
        a = self._phase_grid()
        ca = np.cos(a)
        sa = np.sin(a)
        h = self.amplitude * ca
        dhdx = -(k * cd) * self.amplitude * sa
        dhdy = -(k * sd) * self.amplitude * sa
        sx, sy = self.displacement_grid()
        dsxdx, dsydy, dsxdy = self.displacement_deriv_grid()
        return DisplacementAndDeriv(h, sx, sy, dhdy, dhdx, dsxdx, dsydy, dsxdy)

    def pressure_grid(self, iz: int) -> np.ndarray:
        _, k, _, _ = self._coeffs()
        e = math.exp(k * float(self._z[iz]))
        return e * self.amplitude * np.cos(self._phase_grid())