[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metricsfacade"
version = "0.1.0"
description = "A lightweight metrics facade: emit counters, gauges and histograms to a pluggable recorder."
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "telemetry", "monitoring", "counter", "gauge", "histogram", "instrumentation"]
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
    "Topic :: System :: Monitoring",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metricsfacade-demo = "metricsfacade.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["metricsfacade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
