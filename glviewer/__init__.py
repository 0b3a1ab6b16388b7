"""Vector math, camera, scene vertex data and viewer logic for simple 3D line and triangle scenes."""

__version__ = "1.0.0"
__all__ = ["camera", "geometry", "gldata", "viewer"]