[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seedvdom"
version = "0.1.0"
description = "A virtual DOM model: elements, attributes, styles, listeners and element-building shortcuts"
requires-python = ">=3.10"
dependencies = []
keywords = ["virtual-dom", "vdom", "html", "svg", "ui"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seedvdom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
