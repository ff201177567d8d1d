[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trafficstats"
version = "0.1.0"
description = "Traffic history files, INI settings, skin layouts and history view figures for a network traffic monitor"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "traffic", "monitor", "ini", "skin", "history"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trafficstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
