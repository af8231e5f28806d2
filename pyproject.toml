[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goldfish"
version = "1.0.0"
description = "Game engine core pieces: compressed resource packs, a recorded-canvas GUI, drawing helpers and a null sound device"
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "resource-pack", "gui", "zlib", "utf-8"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
goldfish-pack = "goldfish.pack:main"
goldfish-engineinfo = "goldfish.engineinfo:main"

[tool.hatch.build.targets.wheel]
packages = ["goldfish"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
