"""Physical constants used in the wave and hydrostatics calculations."""

GRAVITY = -9.8
"""Uniform acceleration due to gravity at the earth's surface, z-up [m s-2]."""

G = 6.67408e-11
"""Universal gravitational constant [m3 kg-1 s-2]."""

WATER_DENSITY = 998.6
"""Density of water [kg m-3]."""

WATER_KINEMATIC_VISCOSITY = 1.0533e-6
"""Kinematic viscosity of water at 18 degrees C [m2 s-1]."""