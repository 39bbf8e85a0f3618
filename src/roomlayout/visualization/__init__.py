"""Visualization module for room layouts.

This module renders layouts to PNG images with matplotlib.
"""

from .renderer import render_layout

__all__ = ["render_layout"]
