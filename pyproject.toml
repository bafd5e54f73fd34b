[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "learnbench"
version = "0.1.0"
description = "A workbench of small teaching programs: Huffman compression, IQ signal helpers, design patterns, text lookup and console apps."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "huffman",
    "compression",
    "design-patterns",
    "signal",
    "iq",
    "text-query",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
learnbench-address-book = "learnbench.address_book:main"

[tool.hatch.build.targets.wheel]
packages = ["learnbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
