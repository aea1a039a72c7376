[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listkit"
version = "0.1.0"
description = "Array-backed, singly, circular and doubly linked list containers with positional operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["list", "linked list", "doubly linked list", "circular list", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
listkit-selftest = "listkit.selftest:main"

[tool.hatch.build.targets.wheel]
packages = ["listkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
