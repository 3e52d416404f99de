[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hotelkeep"
version = "0.1.0"
description = "Rooms, guests, reservations and staff roles for a small hotel"
requires-python = ">=3.10"
dependencies = []
keywords = ["hotel", "reservations", "rooms", "guests", "booking", "permissions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hotelkeep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
