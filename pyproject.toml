[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codebuddy"
version = "0.4.20"
description = "Screen state, theming and report generation for an interactive code review tool"
requires-python = ">=3.10"
keywords = ["code-review", "tui", "reports", "markdown", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codebuddy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
