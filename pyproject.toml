[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exprparse"
version = "0.1.0"
description = "Lexer, LL(1) and recursive-descent parsers, and LR(0) closure and goto for a small arithmetic expression grammar"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "lexer", "LL(1)", "LR(0)", "grammar", "first", "follow", "closure", "goto"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
exprparse = "exprparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exprparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
