[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbimager"
version = "0.0.16"
description = "Core logic of a board imaging utility: easing curves, loading indicator state, persisted settings, update checks and screen navigation"
requires-python = ">=3.10"
dependencies = [
    "semver",
]
keywords = ["imaging", "flashing", "sd-card", "easing", "settings", "navigation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Installation/Setup",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bbimager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
