[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monogfx"
version = "0.1.0"
description = "Monochrome graphics for page-organised LCD framebuffers: pixels, lines, circles, bitmaps, text and menus"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "monochrome", "lcd", "framebuffer", "bitmap", "font", "menu"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["monogfx"]

[tool.pytest.ini_options]
addopts = "-ra"
