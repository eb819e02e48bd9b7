[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threetools"
version = "0.1.0"
description = "Three small command-line tools: a bitcoin value calculator, a reverse Polish calculator and a merge-insertion sorter"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitcoin", "exchange-rate", "rpn", "calculator", "sorting", "merge-sort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
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
btc = "threetools.btc:main"
rpn = "threetools.rpn:main"
pmergeme = "threetools.pmergeme:main"

[tool.hatch.build.targets.wheel]
packages = ["threetools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
