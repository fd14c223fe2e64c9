"""Particle-life simulation on a toroidal world, with a headless command."""

__version__ = "0.1.0"