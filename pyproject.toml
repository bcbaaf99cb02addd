[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "waldem"
version = "0.1.0"
description = "Core of a small game engine: events, input, layers, transforms, cameras, culling and an application loop"
requires-python = ">=3.10"
keywords = [
    "game-engine",
    "events",
    "input",
    "layers",
    "transform",
    "camera",
    "frustum-culling",
    "ecs",
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["waldem"]

[tool.hatch.build.targets.sdist]
include = [
    "waldem",
    "tests",
    "pyproject.toml",
]

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
ignore_missing_imports = true
