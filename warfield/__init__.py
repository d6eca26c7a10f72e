"""Armies, units, terrain grids and setup files for a small battle simulation."""

__version__ = "0.1.0"