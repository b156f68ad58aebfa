[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asadvision"
version = "0.1.0"
description = "Engine-free game rules for a side-scrolling boss-fight arena: health and hit boxes, slimes, a laser-firing eye boss, camera, platforms and menu logic."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "boss-fight", "platformer", "arena", "game-logic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["asadvision"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
