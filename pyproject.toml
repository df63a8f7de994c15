[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parquetkit"
version = "0.1.0"
description = "Parquet schema types, schema element conversion and column statistics in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["parquet", "schema", "statistics", "columnar", "file-format"]
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
    "Topic :: File Formats",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parquetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
