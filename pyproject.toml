[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mediafetch"
version = "0.1.0"
description = "Interactive terminal front end for downloading video and audio with yt-dlp"
requires-python = ">=3.10"
keywords = ["download", "cli", "media", "video", "audio", "yt-dlp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]
dependencies = [
    "tqdm>=4.60",
    "platformdirs>=3.0",
    "termcolor>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
mediafetch = "mediafetch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mediafetch"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
