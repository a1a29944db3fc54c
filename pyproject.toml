[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smalltools"
version = "0.1.0"
description = "Small console programs: employee records, Fibonacci series, speed fines, number stats, recycling rewards, vowel analysis and temperature conversion."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "cli", "csv", "fibonacci", "temperature"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
employees = "smalltools.employees:main"
employee-menu = "smalltools.employee_menu:main"
fibonacci = "smalltools.fibonacci:main"
speed-check = "smalltools.speed:main"
numstats = "smalltools.numstats:main"
recycling = "smalltools.recycling:main"
vowels = "smalltools.vowels:main"
temperature = "smalltools.temperature:main"

[tool.hatch.build.targets.wheel]
packages = ["smalltools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
