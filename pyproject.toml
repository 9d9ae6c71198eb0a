[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simlab"
version = "0.1.0"
description = "Small numerical experiments: image compression, particle and gravity simulations, ray casting, cellular automata and prime curiosities"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "simulation",
    "particle-life",
    "gravity",
    "ray-casting",
    "wavelet",
    "fourier",
    "bmp",
    "image-compression",
    "cellular-automata",
    "collatz",
    "primes",
    "total-variation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
simlab-total-variation = "simlab.total_variation:main"
simlab-compress = "simlab.compress:main"

[tool.hatch.build.targets.wheel]
packages = ["simlab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
