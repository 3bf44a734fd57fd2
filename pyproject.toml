[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jclass"
version = "0.1.7"
description = "A small library for parsing and editing Java class files"
requires-python = ">=3.10"
dependencies = []
keywords = ["java", "classfile", "jvm", "bytecode", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jclass"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
