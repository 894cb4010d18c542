[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rascam"
version = "0.1.0"
description = "Live camera spectrum viewer with zoom, pan and a row intensity profile"
requires-python = ">=3.10"
keywords = ["camera", "spectrum", "spectroscopy", "intensity profile", "viewer", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rascam = "rascam.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rascam"]

[tool.pytest.ini_options]
addopts = "-ra"
