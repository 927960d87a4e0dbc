"""Perlin-noise terrain generation, droplet-based hydraulic erosion and viewer state."""

__version__ = "0.1.0"

__all__ = ["__version__"]