[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msmanager"
version = "1.0.0"
description = "Interactive console manager for Malaysian states and federal territories"
requires-python = ">=3.10"
dependencies = []
keywords = ["malaysia", "states", "console", "records", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Malay",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
msmanager = "msmanager.main:main"

[tool.hatch.build.targets.wheel]
packages = ["msmanager"]

[tool.pytest.ini_options]
addopts = "-ra"
