[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstmenu"
version = "0.1.0"
description = "A binary search tree over pluggable element types, with a line-oriented command interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "bst", "data structures", "traversal", "command line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bstmenu = "bstmenu.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["bstmenu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
