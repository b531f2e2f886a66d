[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashboggle"
version = "0.1.0"
description = "A straight-line Boggle word finder, a base-36 string hash and an open-addressing hash table with linear and double-hash probing"
requires-python = ">=3.10"
dependencies = []
keywords = ["boggle", "word-search", "hash-table", "double-hashing", "string-hash", "mersenne-twister"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boggle-driver = "hashboggle.boggle:main"
str-hash = "hashboggle.strhash:main"
ht-demo = "hashboggle.hashtable:main"

[tool.hatch.build.targets.wheel]
packages = ["hashboggle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
