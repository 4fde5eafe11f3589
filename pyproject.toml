[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonver"
version = "2.14.1"
description = "Library version reporting and comparison for a JSON library."
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "version", "compatibility"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
