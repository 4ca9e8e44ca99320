[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nrclaunch"
version = "0.1.0"
description = "Game client launcher toolkit: version profiles, rules, argument building, library and asset downloads"
requires-python = ">=3.10"
keywords = ["minecraft", "launcher", "fabric", "version-profile", "assets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "requests",
    "platformdirs",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
nrclaunch = "nrclaunch.app:main"

[tool.hatch.build.targets.wheel]
packages = ["nrclaunch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
