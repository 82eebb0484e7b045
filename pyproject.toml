[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mb8"
version = "0.1.0"
description = "MB8 virtual machine: an 8-bit instruction set, encoder, decoder and interpreter with a 64x32 display."
requires-python = ">=3.10"
keywords = ["virtual machine", "emulator", "8-bit", "isa", "interpreter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mb8 = "mb8.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mb8"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
