[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdevkeys"
version = "0.1.0"
description = "Keyboard and mouse event model with key code tables for Linux, Windows, macOS, Android, USB HID and browsers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "keyboard",
    "mouse",
    "keycode",
    "scancode",
    "usb-hid",
    "x11",
    "input-events",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rdevkeys"]

[tool.hatch.build.targets.sdist]
include = ["rdevkeys", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
