[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lrusim"
version = "0.1.0"
description = "LRU page replacement simulator driven by BYU binary memory address traces"
requires-python = ">=3.10"
dependencies = []
keywords = ["lru", "page replacement", "virtual memory", "simulation", "memory trace"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lrusim = "lrusim.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["lrusim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
