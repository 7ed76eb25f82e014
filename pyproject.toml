[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "debugglass"
version = "0.1.0"
description = "A live debug overlay of windows, tabs, graphs, variables and message monitors, redrawn from a background thread."
requires-python = ">=3.10"
dependencies = [
    "rich",
]
keywords = [
    "debugging",
    "overlay",
    "telemetry",
    "monitoring",
    "dashboard",
    "terminal",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
debugglass-demo = "debugglass.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["debugglass"]

[tool.pytest.ini_options]
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
