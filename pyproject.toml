[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classplanner"
version = "0.1.0"
description = "Class scheduling service: users, faculty, classes, rooms, schedules and their links in an SQLite database, served as a small JSON HTTP API over WSGI."
requires-python = ">=3.10"
keywords = ["scheduling", "timetable", "classes", "rooms", "faculty", "wsgi", "sqlite"]
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
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Database",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
classplanner = "classplanner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["classplanner"]

[tool.hatch.build.targets.sdist]
include = ["classplanner", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
