[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "assertkit"
version = "0.1.0"
description = "Small predicate functions for checking numbers, network addresses, HTTP status codes, strings, lists, maps and timestamps"
requires-python = ">=3.10"
dependencies = []
keywords = ["assert", "validation", "predicates", "cidr", "ip", "http-status", "rfc3339"]
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
    "Topic :: Software Development :: Testing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "freezegun"]

[tool.hatch.build.targets.wheel]
packages = ["assertkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
