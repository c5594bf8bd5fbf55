[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emucgb"
version = "0.1.0"
description = "Early-stage Game Boy and Game Boy Color emulator core: cartridge, boot ROM, memory map and SM83 CPU"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "game boy color", "emulator", "sm83", "cartridge", "mmu"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["emucgb"]

[tool.pytest.ini_options]
addopts = "-ra"
