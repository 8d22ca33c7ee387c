[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "finql"
version = "0.1.0"
description = "Business calendars, day count conventions, business day adjustment and coupon dates for fixed income calculations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "finance",
    "fixed income",
    "bonds",
    "calendar",
    "business days",
    "holidays",
    "day count convention",
    "year fraction",
]
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
    "Topic :: Office/Business :: Financial",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
finql-uk-settlement = "finql.uk_settlement:main"

[tool.hatch.build.targets.wheel]
packages = ["finql"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
