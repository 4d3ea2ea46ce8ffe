"""Raster graphics algorithms: line and circle rasterisation, line clipping, 2D transforms and a text canvas."""

__version__ = "0.1.0"