[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strobesync"
version = "0.1.0"
description = "Bounded ring buffers and channels for passing values between threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["ring buffer", "channel", "queue", "spsc", "mpsc", "threading"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["strobesync"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
