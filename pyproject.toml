[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quicky"
version = "0.1.0"
description = "Protocol toolkit for QCY Bluetooth earbuds: command packets, notification parsing, advertisement decoding and a product catalogue."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "qcy",
    "earbuds",
    "headphones",
    "bluetooth",
    "ble",
    "advertisement",
    "anc",
    "equalizer",
]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quicky"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
