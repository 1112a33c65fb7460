"""Geometry primitives, text coordinates, framework helpers and a small component tree for immediate-mode UI layout."""

__version__ = "1.0.0"
__all__ = ["components", "coordinate", "framework", "geometry"]