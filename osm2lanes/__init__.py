"""Typed OpenStreetMap tag schemes, a lane-by-lane road model and Overpass lookups."""

__version__ = "0.1.0"