[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emos"
version = "0.1.0"
description = "Boot-stage console output: teletype character writing and a small printf-style formatter"
requires-python = ">=3.10"
dependencies = []
keywords = ["boot", "bootloader", "printf", "teletype", "formatting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Boot",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
emos = "emos.main:main"

[tool.hatch.build.targets.wheel]
packages = ["emos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
