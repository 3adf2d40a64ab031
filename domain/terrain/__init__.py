"""Terrain Bounded Context.

Responsible for elevation data and sampling along viewing rays:
- Ports: DiscreteElevationModel (raster sampling contract)
- Models: CompositeElevationModel, ContinuousElevationModel
- Services: ElevationProfile (geodesic sampling cache along one ray)
"""
