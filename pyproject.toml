[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fundalgo"
version = "0.1.0"
description = "Small classic algorithms and data structures: digit-string arithmetic, extended scanf-style parsing, bit-level integers, RC4, bitwise logic, complex numbers, a growable vector and a warehouse model."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "rc4",
    "roman-numerals",
    "zeckendorf",
    "bitwise",
    "complex-numbers",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fundalgo-binary-int = "fundalgo.binary_int:main"
fundalgo-rc4 = "fundalgo.rc4:main"
fundalgo-logical = "fundalgo.logical:main"
fundalgo-complex = "fundalgo.complexnum:main"
fundalgo-vector = "fundalgo.vector:main"
fundalgo-warehouse = "fundalgo.warehouse:main"

[tool.hatch.build.targets.wheel]
packages = ["fundalgo"]

[tool.hatch.build.targets.sdist]
include = ["fundalgo", "tests", "README.md", "pyproject.toml"]

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
