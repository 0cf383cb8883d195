[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "staffdesk"
version = "0.1.0"
description = "Employee record search, paged tables and salary statistics rendered as plain text"
requires-python = ">=3.10"
dependencies = []
keywords = ["employees", "staff", "search", "statistics", "payroll", "console"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["staffdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
