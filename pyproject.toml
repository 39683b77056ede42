[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dgmkit"
version = "0.1.0"
description = "Building blocks for 2D games: collision objects, meshes, paths, buffers, spatial indexing and resource management"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamedev", "spatial-index", "collision", "mesh", "resources"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dgmkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
