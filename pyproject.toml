[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trackercore"
version = "0.1.0"
description = "Building blocks for a music tracker: red-black tree, reference-counted IDs, lock hierarchies, bitmap text layout, waveform rendering and note names"
requires-python = ">=3.10"
dependencies = []
keywords = ["tracker", "music", "red-black tree", "lock hierarchy", "waveform", "identifiers"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["trackercore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
