[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "learnbox"
version = "0.1.0"
description = "Small terminal games and text exercises: snake, tennis, two tetris variants, binary conversion, figure rotation, sorting and word splitting"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "terminal", "curses", "tetris", "snake", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
learnbox-bin2dec = "learnbox.binary:main"
learnbox-hello = "learnbox.hello:main"
learnbox-rotate = "learnbox.rotate:main"
learnbox-sort = "learnbox.sorting:main"
learnbox-split = "learnbox.strproc:main"
learnbox-snake = "learnbox.snake:main"
learnbox-tennis = "learnbox.tennis:main"
learnbox-tetris = "learnbox.tetris:main"
learnbox-tetris-classic = "learnbox.tetris_classic:main"

[tool.hatch.build.targets.wheel]
packages = ["learnbox"]

[tool.pytest.ini_options]
addopts = "-ra"
