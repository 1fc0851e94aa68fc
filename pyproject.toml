[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tunebox"
version = "0.1.0"
description = "A small console music player with local user accounts and per-user playlists"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["music", "player", "playlist", "audio", "sqlite"]
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
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tunebox = "tunebox.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tunebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
