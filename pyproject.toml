[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cinelog"
version = "0.1.0"
description = "A small terminal catalogue of movies and series with persistent user ratings"
requires-python = ">=3.10"
dependencies = []
keywords = ["movies", "series", "catalogue", "ratings", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cinelog = "cinelog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cinelog"]

[tool.pytest.ini_options]
addopts = "-ra"
