[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfdlab"
version = "0.1.0"
description = "Finite element building blocks: points, Jacobians, element bases, element integrals by quadrature, and debug helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cfd", "fem", "finite element", "numerical methods", "basis functions", "quadrature"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cfdlab"]

[tool.pytest.ini_options]
addopts = "-ra"
