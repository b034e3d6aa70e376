[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gavelkit"
version = "0.1.0"
description = "Small utilities for polling loops: bounded queues and stacks, timers, stopwatches, string formatting helpers and callbacks"
requires-python = ">=3.10"
dependencies = []
keywords = ["timer", "queue", "stack", "stopwatch", "string builder", "callbacks", "utilities"]
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
packages = ["gavelkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
