[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "onionkit"
version = "4.0.3"
description = "Handheld launcher helpers: play-time tracking, slideshows, key event writing, install progress, themes and tweak settings"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "handheld",
    "launcher",
    "play-time",
    "slideshow",
    "evdev",
    "themes",
    "retroarch",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
play-activity = "onionkit.play_activity:main"
sendkeys = "onionkit.sendkeys:main"

[tool.hatch.build.targets.wheel]
packages = ["onionkit"]

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
