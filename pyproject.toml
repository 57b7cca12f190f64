[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mexc_api"
version = "0.1.0"
description = "Client for the MEXC spot (v3) market data API, with spot account helpers, futures request signing and error codes."
requires-python = ">=3.10"
keywords = ["mexc", "exchange", "trading", "crypto", "futures", "spot", "rest", "api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mexc_api"]

[tool.hatch.build.targets.sdist]
include = ["mexc_api", "tests"]

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
packages = ["mexc_api"]
warn_unused_ignores = true
