[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lassdb"
version = "0.1.0"
description = "A lightweight, embeddable key-value database for versioned user records"
requires-python = ">=3.11"
dependencies = []
keywords = ["database", "embedded", "key-value", "schema", "migration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lassdb = "lassdb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lassdb"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
strict = true
