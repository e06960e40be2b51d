[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edgecontracts"
version = "0.1.0"
description = "Data contracts for edge device services: readings, value descriptors, resource operations and configuration messages with JSON encoding and validation."
requires-python = ">=3.10"
dependencies = []
keywords = ["edge", "iot", "contracts", "models", "json", "validation"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edgecontracts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
