[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kaju"
version = "0.1.0"
description = "A small game engine core on pygame: a window, blocking input events and engine logging"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "events", "window", "pygame", "logging"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kaju-sandbox = "kaju.sandbox:main"

[tool.hatch.build.targets.wheel]
packages = ["kaju"]

[tool.pytest.ini_options]
addopts = "-ra"
