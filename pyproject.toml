[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easyedit"
version = "0.1.0"
description = "A small modal terminal text editor with normal, insert and visual selection, undo/redo and clipboard support"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "terminal", "text", "modal", "vi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
easyedit = "easyedit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["easyedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
