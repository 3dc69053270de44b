[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autocompleteme"
version = "0.1.0"
description = "Interactive prefix autocomplete over a file of weighted terms, ranked by weight"
requires-python = ">=3.10"
dependencies = []
keywords = ["autocomplete", "prefix search", "binary search", "sorting", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
autocompleteme = "autocompleteme.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["autocompleteme"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
