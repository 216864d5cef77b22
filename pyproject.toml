[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katas"
version = "0.1.0"
description = "Small programming exercises: number puzzles, string transforms, validators and a learning machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["katas", "exercises", "puzzles", "algorithms", "practice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
create-kata = "katas.scaffold:main"

[tool.hatch.build.targets.wheel]
packages = ["katas"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
