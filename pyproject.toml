[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lawnsiege"
version = "0.1.0"
description = "A headless lane-defence game model: plants, projectiles, zombies, cards and scenes driven by a fixed timer tick"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tower-defence", "lane-defence", "simulation", "strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lawnsiege = "lawnsiege.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lawnsiege"]

[tool.hatch.build.targets.sdist]
include = ["lawnsiege", "tests", "README.md", "pyproject.toml"]

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
warn_unused_ignores = true
warn_redundant_casts = true
