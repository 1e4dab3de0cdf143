"""Scene-file parsing, grid raycasting into a frame buffer, and player movement."""

__version__ = "1.0.0"