[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meermookh"
version = "0.1.0"
description = "A small side-scrolling platformer with tile maps, a chasing enemy and melee combat"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "pygame", "tmx", "tilemap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
meermookh = "meermookh.game:main"

[tool.hatch.build.targets.wheel]
packages = ["meermookh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
