[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tradesim"
version = "0.1.0"
description = "A menu-driven currency trading simulator that replays an order book from a CSV file"
requires-python = ">=3.10"
dependencies = []
keywords = ["trading", "simulation", "order book", "exchange", "portfolio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tradesim = "tradesim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tradesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
