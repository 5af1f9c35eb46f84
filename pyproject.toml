[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quickpick"
version = "5.3.0"
description = "Item matching and input editing for a keyboard-driven dynamic menu, plus a command that filters file names by file properties"
requires-python = ">=3.10"
dependencies = []
keywords = ["menu", "launcher", "filter", "matching", "stest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quickpick-stest = "quickpick.stest:main"

[tool.hatch.build.targets.wheel]
packages = ["quickpick"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
