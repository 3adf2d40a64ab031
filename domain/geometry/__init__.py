"""Geometry Bounded Context.

Leaf-level primitives shared by the terrain and panorama contexts:
- Numerics: interpolation, root bracketing and bisection
- Value Objects: Interval1D, Interval2D, GeoPoint
- Azimuth and spherical-distance helpers
"""
