[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minirt"
version = "0.1.0"
description = "Scene parsing, ray intersection and BMP output for a small ray tracer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "bmp", "3d", "graphics", "scene"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minirt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
