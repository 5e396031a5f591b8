[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpllsat"
version = "0.1.0"
description = "A small DPLL-based SAT solver with a DIMACS CNF reader, a flat clause store and an exhaustive checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "solver", "dpll", "cnf", "dimacs", "boolean", "satisfiability", "logic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dpllsat = "dpllsat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dpllsat"]

[tool.hatch.build.targets.sdist]
include = ["dpllsat", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
