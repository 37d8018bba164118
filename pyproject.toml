[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agendafiltro"
version = "0.1.0"
description = "Reads a plain-text appointment agenda, computes priorities and writes schedule report files."
requires-python = ">=3.10"
dependencies = []
keywords = ["agenda", "appointments", "scheduling", "reports", "priorities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
agendafiltro = "agendafiltro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["agendafiltro"]

[tool.pytest.ini_options]
addopts = "-ra"
