[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "justjp2"
version = "0.1.1"
description = "Building blocks of a JPEG 2000 codec: byte streams, quantization, tag trees, tile geometry and Tier-1 context formation"
requires-python = ">=3.10"
dependencies = []
keywords = ["jpeg2000", "jp2", "j2k", "image", "codec"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["justjp2"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
