[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "midware"
version = "0.1.0"
description = "Small middleware building blocks: ring buffer, matrix, priority queue, CSV reading, periodic scheduler, sensor drivers and ZeroMQ nodes"
requires-python = ">=3.10"
dependencies = [
    "pyzmq",
]
keywords = [
    "middleware",
    "zeromq",
    "pubsub",
    "request-reply",
    "scheduler",
    "ring-buffer",
    "matrix",
    "priority-queue",
]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
midware-circular-buffer = "midware.circular_buffer:main"
midware-matrix = "midware.matrix:main"
midware-metrics = "midware.metrics:main"
midware-csv = "midware.csv_parser:main"
midware-scheduler = "midware.scheduler:main"
midware-driver = "midware.driver:main"
midware-publisher = "midware.nodes:publisher_main"
midware-subscriber = "midware.nodes:subscriber_main"
midware-server = "midware.nodes:server_main"
midware-client = "midware.nodes:client_main"

[tool.hatch.build.targets.wheel]
packages = ["midware"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
