[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scenegraph3d"
version = "0.1.0"
description = "Frame timing, component type names and OpenGL layout helpers for 3D rendering code"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "opengl", "std140", "uniform block", "vertex attributes", "frame timing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scenegraph3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
