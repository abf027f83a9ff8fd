[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "testkatas"
version = "0.1.0"
description = "Small classes and functions with well-defined behaviour, for practising unit testing, TDD and mocking"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "testing",
    "tdd",
    "kata",
    "mocking",
    "unit-testing",
    "refactoring",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
testkatas-videostore = "testkatas.videostore:main"

[tool.hatch.build.targets.wheel]
packages = ["testkatas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
