[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toonkit"
version = "0.4.5"
description = "Encoder for Token-Oriented Object Notation (TOON), a compact, token-efficient alternative to JSON for prompts"
requires-python = ">=3.10"
dependencies = []
keywords = ["toon", "json", "token", "serialization", "encoder"]
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
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["toonkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
