"""Linear regular wave simulation on a grid, with mesh and intersection geometry."""

__version__ = "1.0.0"