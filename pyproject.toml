[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillkit"
version = "0.1.0"
description = "Load, compile, run and check the completion state of small Rust exercises, with worked Python solutions to many of them."
requires-python = ">=3.11"
dependencies = []
keywords = ["exercises", "learning", "rust", "rustc", "clippy", "rust-analyzer", "training"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-mock",
]

[tool.hatch.build.targets.wheel]
packages = ["drillkit"]

[tool.hatch.build.targets.sdist]
include = ["drillkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
