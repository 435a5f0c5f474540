"""Core logic of a minimalist 2D puzzle platformer: geometry, rigid bodies, rasterisation, UI widget state, font layout and level discovery."""

__version__ = "0.1.0"