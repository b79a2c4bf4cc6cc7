[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csopesy"
version = "0.1.0"
description = "A small interactive command-line shell with named process screens"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "emulator", "screens", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
csopesy = "csopesy.emulator:main"
csopesy-shell = "csopesy.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["csopesy"]

[tool.pytest.ini_options]
addopts = "-ra"
