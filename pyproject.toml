[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockui"
version = "0.1.0"
description = "Rendering-free input handling for dockable panels, sliders, scrollbars and a piece-list text editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "docking", "panels", "slider", "scrollbar", "text-editor", "piece-table"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["dockui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
