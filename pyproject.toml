[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "log2"
version = "0.2.0"
description = "Out-of-the-box logging to stdout or to size-rotated, optionally gzip-compressed files, written from a background thread."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "log", "rotation", "gzip", "tee", "stdout"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
log2-demo = "log2.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["log2"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
