[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timingkit"
version = "0.1.0"
description = "Stopwatches and named timers for measuring elapsed time."
requires-python = ">=3.10"
dependencies = []
keywords = ["timing", "stopwatch", "timer", "profiling", "elapsed"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["timingkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
