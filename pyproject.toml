[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eulerworks"
version = "1.0.0"
description = "Solutions to classic number-theory puzzles and a rational-root finder for cubic equations"
requires-python = ">=3.10"
dependencies = []
keywords = ["project euler", "primes", "number theory", "puzzles", "cubic equations"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
euler-004 = "eulerworks.problem004:main"
euler-005 = "eulerworks.problem005:main"
euler-006 = "eulerworks.problem006:main"
euler-007 = "eulerworks.problem007:main"
euler-009 = "eulerworks.problem009:main"
euler-047 = "eulerworks.problem047:main"
euler-048 = "eulerworks.problem048:main"
euler-049 = "eulerworks.problem049:main"
euler-050 = "eulerworks.problem050:main"
euler-051 = "eulerworks.problem051:main"
euler-052 = "eulerworks.problem052:main"
euler-053 = "eulerworks.problem053:main"
euler-054 = "eulerworks.problem054:main"
euler-055 = "eulerworks.problem055:main"
euler-056 = "eulerworks.problem056:main"
euler-057 = "eulerworks.problem057:main"
euler-058 = "eulerworks.problem058:main"
euler-059 = "eulerworks.problem059:main"
euler-060 = "eulerworks.problem060:main"
cubic-roots = "eulerworks.cubic:main"

[tool.hatch.build.targets.wheel]
packages = ["eulerworks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
