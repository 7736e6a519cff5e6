[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teachos"
version = "0.1.0"
description = "Helpers and small Unix-style tools from a teaching operating system: Sv39 paging arithmetic, ELF headers, printf, a heap allocator, grep and friends."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-system",
    "teaching",
    "risc-v",
    "sv39",
    "elf",
    "malloc",
    "grep",
    "unix-tools",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: System :: Operating System",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
teachos-cat = "teachos.cat:main"
teachos-echo = "teachos.echo:main"
teachos-grep = "teachos.grep:main"
teachos-wc = "teachos.wc:main"
teachos-find = "teachos.find:main"
teachos-primes = "teachos.primes:main"

[tool.hatch.build.targets.wheel]
packages = ["teachos"]

[tool.hatch.build.targets.sdist]
include = ["teachos", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
