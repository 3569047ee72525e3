[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qcc"
version = "0.22.7.38"
description = "Model, validator and geometry logic for user-interface controls: validators, suggestion lists, tooltip queues, dashed lines and animated indicators"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "controls", "validators", "models", "widgets"]
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
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qcc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
