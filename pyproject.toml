[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glviewer"
version = "1.0.0"
description = "Orbit and free-fly camera, vector math, scene vertex data and viewer input logic for simple 3D line and triangle scenes"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "camera", "quaternion", "projection", "viewer", "opengl", "grid", "axes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glviewer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
