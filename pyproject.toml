[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "betterwall"
version = "0.2.0"
description = "Wallpaper transition engine, easing curves and core utilities for a desktop wallpaper manager"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["wallpaper", "transition", "easing", "desktop", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["betterwall"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
