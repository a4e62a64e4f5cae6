[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cometshooter"
version = "0.1.0"
description = "A small side-scrolling shooter: fend off mummies and an alien, then survive the comet shower."
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "pygame", "side-scroller"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cometshooter = "cometshooter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cometshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
