[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "idxdkit"
version = "0.1.0"
description = "Data accelerator descriptor layouts, kernel-version test bookkeeping and small low-level helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["idxd", "dsa", "iax", "descriptor", "completion-record", "endian", "linked-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["idxdkit"]

[tool.pytest.ini_options]
addopts = "-ra"
