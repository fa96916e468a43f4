"""Interfaces for wave fields and gridded wave simulations.

Gridded results are one-dimensional arrays of ``size_x * size_y`` values with
x varying fastest: the value for ``(ix, iy)`` is at ``iy * size_x + ix``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np


class WaveField(ABC):
    """Wave elevation and fluid pressure at arbitrary points."""

    @abstractmethod
    def elevation(self, x: float, y: float) -> float:
        """Free-surface elevation at ``(x, y)``."""

    def elevations(self, x: Iterable[float], y: Iterable[float]) -> np.ndarray:
        """Elevations at paired points; stops at the shorter input."""
        return np.array([self.elevation(xi, yi) for xi, yi in zip(x, y)], dtype=float)

    @abstractmethod
    def pressure(self, x: float, y: float, z: float) -> float:
        """Dynamic pressure at ``(x, y, z)``."""

    def pressures(
        self, x: Iterable[float], y: Iterable[float], z: Iterable[float]
    ) -> np.ndarray:
        """Pressures at paired points; stops at the shortest input."""
        return np.array(
            [self.pressure(xi, yi, zi) for xi, yi, zi in zip(x, y, z)], dtype=float
        )


class DisplacementAndDeriv(NamedTuple):
    """Elevation, horizontal displacement and their derivatives on a grid."""

    h: np.ndarray
    sx: np.ndarray
    sy: np.ndarray
    dhdx: np.ndarray
    dhdy: np.ndarray
    dsxdx: np.ndarray
    dsydy: np.ndarray
    dsxdy: np.ndarray


class WaveSimulation(ABC):
    """A wave field computed on a discrete grid."""

    @property
    @abstractmethod
    def size_x(self) -> int:
        """Number of grid samples in x."""

    @property
    @abstractmethod
    def size_y(self) -> int:
        """Number of grid samples in y."""

    @property
    @abstractmethod
    def size_z(self) -> int:
        """Number of pressure sample depths."""

    @abstractmethod
    def set_wind_velocity(self, ux: float, uy: float) -> None:
        """Set the wind velocity driving the waves."""

    @abstractmethod
    def set_steepness(self, value: float) -> None:
        """Set the wave steepness."""

    @abstractmethod
    def set_time(self, value: float) -> None:
        """Set the simulation time."""

    @abstractmethod
    def elevation_at(self, ix: int, iy: int) -> float:
        """Elevation at grid sample ``(ix, iy)``."""

    @abstractmethod
    def displacement_at(self, ix: int, iy: int) -> tuple[float, float]:
        """Horizontal displacement ``(sx, sy)`` at grid sample ``(ix, iy)``."""

    @abstractmethod
    def pressure_at(self, ix: int, iy: int, iz: int) -> float:
        """Pressure at grid sample ``(ix, iy)`` and depth index ``iz``."""

    @abstractmethod
    def elevation_grid(self) -> np.ndarray:
        """Elevation at every grid sample."""

    @abstractmethod
    def elevation_deriv_grid(self) -> tuple[np.ndarray, np.ndarray]:
        """Elevation derivatives ``(dhdx, dhdy)`` at every grid sample."""

    @abstractmethod
    def displacement_grid(self) -> tuple[np.ndarray, np.ndarray]:
        """Horizontal displacements ``(sx, sy)`` at every grid sample."""

    @abstractmethod
    def displacement_deriv_grid(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Displacement derivatives ``(dsxdx, dsydy, dsxdy)`` on the grid."""

    def displacement_and_deriv_grid(self) -> DisplacementAndDeriv:
        """All gridded elevation and displacement quantities at once."""
        h = self.elevation_grid()
        sx, sy = self.displacement_grid()
        dhdx, dhdy = self.elevation_deriv_grid()
        dsxdx, dsydy, dsxdy = self.displacement_deriv_grid()
        return DisplacementAndDeriv(h, sx, sy, dhdx, dhdy, dsxdx, dsydy, dsxdy)

    @abstractmethod
    def pressure_grid(self, iz: int) -> np.ndarray:
        """Pressure at every grid sample for depth index ``iz``."""