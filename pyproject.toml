[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ibuttonconv"
version = "0.1.0"
description = "Convert Cyfral and Metakom iButton key codes into Dallas DS1990 key codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["ibutton", "dallas", "ds1990", "cyfral", "metakom", "1-wire", "crc8", "converter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ibuttonconv = "ibuttonconv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ibuttonconv"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
