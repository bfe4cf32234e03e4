[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "docspell"
version = "0.1.0"
description = "Building blocks for spell checking documentation: configuration, dictionary checks, word quirks, command line parsing and patching of source files."
requires-python = ">=3.11"
keywords = ["spellcheck", "spelling", "documentation", "hunspell", "docs", "lint"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
    "Topic :: Text Processing :: Linguistic",
]
dependencies = [
    "platformdirs>=3.0",
    "regex>=2023.0",
    "tomli-w>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["docspell"]

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
