[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frengine"
version = "0.2.0"
description = "Core pieces of a small game engine: vector and matrix math, an event dispatcher with input tracking, and an entity-component-system."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "ecs", "entity-component-system", "events", "vector", "matrix", "quaternion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["frengine"]

[tool.pytest.ini_options]
addopts = "-ra"
