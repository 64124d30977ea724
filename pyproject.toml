[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpnotes"
version = "0.1.0"
description = "Competitive-programming algorithms: number theory, primes, recurrences, graphs, flows, scheduling, bits and geometry."
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "algorithms",
    "competitive-programming",
    "number-theory",
    "graphs",
    "max-flow",
    "scheduling",
    "fft",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cpnotes-bigmul = "cpnotes.polynomial:main"
cpnotes-unmatched = "cpnotes.flow:main"

[tool.hatch.build.targets.wheel]
packages = ["cpnotes"]

[tool.hatch.build.targets.sdist]
include = [
    "cpnotes",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
