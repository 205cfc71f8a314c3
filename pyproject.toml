[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typedinput"
version = "1.0.0"
description = "Typed line-oriented prompts for the console, with small example programs built on them"
requires-python = ">=3.10"
dependencies = []
keywords = ["input", "prompt", "console", "teaching", "stdin"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
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
typedinput-agree = "typedinput.agree:main"
typedinput-calculator = "typedinput.calculator:main"
typedinput-compare = "typedinput.compare:main"
typedinput-hello = "typedinput.hello:main"
typedinput-mario = "typedinput.mario:main"
typedinput-meow = "typedinput.meow:main"

[tool.hatch.build.targets.wheel]
packages = ["typedinput"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
