[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terminvaders"
version = "0.1.0"
description = "Terminal arcade game with sound effects, in the style of Space Invaders"
requires-python = ">=3.10"
keywords = ["terminal", "game", "arcade", "invaders", "audio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "blessed",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
terminvaders = "terminvaders.app:main"

[tool.hatch.build.targets.wheel]
packages = ["terminvaders"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
