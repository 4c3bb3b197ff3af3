[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixed8"
version = "1.0.0"
description = "Signed 32-bit fixed-point numbers with 8 fractional bits"
requires-python = ">=3.10"
keywords = ["fixed-point", "arithmetic", "numbers"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fixed8-demo = "fixed8.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["fixed8"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
