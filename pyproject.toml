[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lynxvm"
version = "0.1.0"
description = "Data model of a small register-based virtual machine: tagged values, instructions, bytecode headers and register state"
requires-python = ">=3.10"
dependencies = []
keywords = ["virtual-machine", "bytecode", "interpreter", "registers", "serialization"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lynxvm"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
