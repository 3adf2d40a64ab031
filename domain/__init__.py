"""Panorama Domain Layer.

This package contains the core logic organized by bounded contexts:
- geometry: Intervals, azimuths, spherical distances, root finding
- terrain: Elevation models, continuous sampling, ray profiles
- panorama: View parameters, per-pixel visibility search, results
"""

# Imports alphabetized per project style (isort)
from domain import geometry, panorama, terrain

__all__ = ["geometry", "panorama", "terrain"]
