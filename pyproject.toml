[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fitfuel"
version = "0.1.0"
description = "Interactive console nutrition tracker: daily calorie goals, food history and weekly meal plans"
requires-python = ">=3.10"
dependencies = []
keywords = ["nutrition", "calories", "diet", "meal-plan", "fitness", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
fitfuel = "fitfuel.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fitfuel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
