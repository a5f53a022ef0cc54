[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "lowkit"
version = "0.1.0"
description = "Small Unix tools: line reading, race laps, ELF header dumping, directory listing and signal helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["getline", "readelf", "elf", "ls", "signals", "unix", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lowkit-getline = "lowkit.getline:main"
lowkit-laps = "lowkit.laps:main"
lowkit-readelf = "lowkit.readelf:main"
lowkit-ls = "lowkit.ls:main"
lowkit-signal-describe = "lowkit.sigtools:describe_main"
lowkit-signal-send = "lowkit.sigtools:send_main"
lowkit-suspend = "lowkit.sigtools:suspend_main"
lowkit-wait = "lowkit.sigtools:wait_main"

[tool.setuptools.packages.find]
include = ["lowkit*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
