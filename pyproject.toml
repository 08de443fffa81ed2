[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "openisl"
version = "0.1.0"
description = "Interactive smart log: a compact commit view and shortcuts for everyday git operations"
requires-python = ">=3.11"
keywords = ["git", "cli", "smart-log", "version-control", "developer-tools"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
openisl = "openisl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["openisl"]

[tool.pytest.ini_options]
addopts = "-ra"
