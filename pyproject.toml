[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "erosionsim"
version = "0.1.0"
description = "Perlin-noise terrain generation with droplet-based hydraulic erosion"
requires-python = ">=3.10"
dependencies = []
keywords = ["terrain", "erosion", "perlin", "noise", "procedural", "heightmap", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
erosionsim = "erosionsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["erosionsim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"
