[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadeforge"
version = "0.1.0"
description = "A small arcade engine with a steering demo and a falling-block puzzle game"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["arcade", "game", "engine", "falling blocks", "vector", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arcadeforge-demo = "arcadeforge.demo:main"
arcadeforge-tetris = "arcadeforge.tetris.app:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadeforge"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
