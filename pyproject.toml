[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledarcade"
version = "0.1.1"
description = "A joystick-driven car game and menu on a simulated 128x64 monochrome OLED display"
requires-python = ">=3.10"
dependencies = []
keywords = ["arcade", "oled", "ssd1306", "joystick", "game", "framebuffer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oledarcade = "oledarcade.app:main"

[tool.hatch.build.targets.wheel]
packages = ["oledarcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
