"""Panorama Bounded Context.

Responsible for per-pixel terrain visibility:
- Value Objects: PanoramaParameters, Panorama, PixelObservation
- Builder: PanoramaBuilder (single-use)
- Services: PanoramaComputer (ray/terrain intersection search)
"""
