[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runesets"
version = "0.1.0"
description = "Compact, fast membership sets of Unicode code points"
requires-python = ">=3.10"
dependencies = []
keywords = ["unicode", "code points", "runes", "set", "bitmap", "character classes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["runesets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
