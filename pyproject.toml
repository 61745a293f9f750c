[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inquest"
version = "0.1.0"
description = "Building blocks for interactive terminal prompts: text input editing, key actions, parsers, formatters, autocompletion and typed yes/no and custom-type prompts."
requires-python = ">=3.10"
keywords = ["prompt", "terminal", "cli", "input", "autocompletion", "confirm", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]
dependencies = [
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["inquest"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
