"""Viewer for clouds of spheres read from text coordinate files: reader, camera, projection and a Tk window."""

__version__ = "1.0.0"

__all__ = ["__version__"]