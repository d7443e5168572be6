[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "farhorizons"
version = "0.1.0"
description = "Galaxy, planet and star chart generation for the Far Horizons play-by-mail strategy game"
requires-python = ">=3.10"
dependencies = []
keywords = ["far horizons", "strategy", "play-by-mail", "galaxy", "game", "star chart"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fh-newgal = "farhorizons.galaxy:main"
fh-starchart = "farhorizons.starchart:main"

[tool.hatch.build.targets.wheel]
packages = ["farhorizons"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
