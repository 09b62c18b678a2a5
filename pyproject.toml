[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipex"
version = "0.1.0"
description = "Run two commands as a shell pipeline between an input file and an output file"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipe", "pipeline", "shell", "subprocess", "redirection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipex = "pipex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pipex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
