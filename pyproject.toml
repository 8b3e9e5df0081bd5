[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gatekit"
version = "0.1.0"
description = "Small building blocks for gateway services: a byte buffer, containers, substring search, timers, a thread pool, a service tree and a process supervisor"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ring-buffer",
    "hash-table",
    "linked-list",
    "red-black-tree",
    "kmp",
    "timer-heap",
    "thread-pool",
    "supervisor",
    "watchdog",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gatekit-supervisor = "gatekit.supervisor:main"

[tool.hatch.build.targets.wheel]
packages = ["gatekit"]

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
warn_unused_ignores = true
