[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "busbooking"
version = "0.1.0"
description = "A console bus booking system for passengers, bus operators and administrators"
requires-python = ">=3.10"
dependencies = []
keywords = ["bus", "booking", "tickets", "routes", "console"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
busbooking = "busbooking.cli:main"
obus = "busbooking.obus:main"

[tool.hatch.build.targets.wheel]
packages = ["busbooking"]

[tool.pytest.ini_options]
addopts = "-ra"
