[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unidb"
version = "0.1.0"
description = "A small interactive database of university students and workers, with PESEL validation and plain-text persistence."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "students", "workers", "pesel", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unidb = "unidb.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["unidb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
