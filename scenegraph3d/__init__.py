"""Frame timing, component type names and OpenGL layout helpers for 3D rendering code."""

__version__ = "0.1.0"