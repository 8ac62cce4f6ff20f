[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astc_infill"
version = "0.1.0"
description = "ASTC color endpoint mode helpers and bilinear weight-grid infill for texture block decoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["astc", "texture", "compression", "gpu", "weight infill", "endpoint mode"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["astc_infill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
