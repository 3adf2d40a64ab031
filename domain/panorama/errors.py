"""Panorama Bounded Context - Error Hierarchy."""

from __future__ import annotations


class PanoramaError(Exception):
    """Base error for panorama operations."""


class PanoramaAlreadyBuiltError(PanoramaError, RuntimeError):
    """PanoramaBuilder was used after build() handed its arrays over."""
