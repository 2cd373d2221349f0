[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ixa"
version = "0.2.0"
description = "Building blocks for agent-based models: a plan queue, seeded random streams, CSV reports and progress bars"
requires-python = ">=3.10"
dependencies = []
keywords = ["agent-based-model", "simulation", "discrete-event", "priority-queue", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ixa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
