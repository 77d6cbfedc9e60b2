[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sckit"
version = "0.1.0"
description = "Small toolkit: JSON tree parser and printer, key/value config reader, CSV table reader, per-thread file logger and simple containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "csv", "config", "logging", "linked-list", "binary-search-tree"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sckit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
