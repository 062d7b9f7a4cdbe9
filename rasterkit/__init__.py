"""A small software rasterizer: geometry, transforms, projection, 2D drawing and shaded rendering to PPM."""

__version__ = "0.1.0"