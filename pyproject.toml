[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minimr"
version = "0.1.0"
description = "A small MapReduce framework: a task coordinator, a worker and pluggable map/reduce applications"
requires-python = ">=3.10"
dependencies = []
keywords = ["mapreduce", "distributed", "coordinator", "worker", "word-count"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mrsequential = "minimr.sequential:main"
mrcoordinator = "minimr.coordinator_cli:main"
mrworker = "minimr.worker_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minimr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
