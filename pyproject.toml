[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bakumetro"
version = "0.1.0"
description = "A threaded terminal simulation of trains running on the Baku Metro lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "metro", "subway", "trains", "threading", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bakumetro = "bakumetro.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["bakumetro"]

[tool.pytest.ini_options]
addopts = "-ra"
