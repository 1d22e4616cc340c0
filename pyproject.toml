[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goboscript"
version = "0.1.0"
description = "Front end for the goboscript language: lexer, macro pre-processor, include resolution, diagnostics and source formatter"
requires-python = ">=3.10"
dependencies = [
    "semver",
]
keywords = ["goboscript", "scratch", "compiler", "lexer", "preprocessor", "formatter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
goboscript = "goboscript.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["goboscript"]

[tool.pytest.ini_options]
addopts = "-ra"
