[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squeezer"
version = "1.0.0"
description = "File compression tool with Huffman and LZW algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["compression", "huffman", "lzw", "bitstream", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
squeezer = "squeezer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["squeezer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
