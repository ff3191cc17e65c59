[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmdesk"
version = "0.1.0"
description = "Building blocks for a desktop recorder: damage-rectangle tracking, option parsing, damage clipping, a stand-in cursor and signal-driven run state"
requires-python = ">=3.10"
dependencies = []
keywords = ["screen capture", "screencast", "desktop recording", "damage", "rectangles", "command line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Capture :: Screen Capture",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rmdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
