[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hoteldesk"
version = "0.1.0"
description = "Terminal hotel booking desk for guests and staff: room catalogue, reservations, payments, messages and a virtual reception"
requires-python = ">=3.10"
dependencies = []
keywords = ["hotel", "reservations", "booking", "reception", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hoteldesk = "hoteldesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hoteldesk"]

[tool.pytest.ini_options]
addopts = "-ra"
