[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmsu"
version = "0.7.5"
description = "Core of a file tagging tool: tag and value entities, a tag query language, file fingerprints, path trees and terminal output helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tagging", "tags", "files", "query", "fingerprint", "filesystem"]
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
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tmsu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
