[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ordlists"
version = "0.1.0"
description = "Ordered list structures with 1-based positions: sequential lists and singly, doubly and circular linked lists"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "sequential list",
    "doubly linked list",
    "circular list",
    "data structures",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["ordlists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
