[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bsdelta"
version = "0.1.0"
description = "Binary delta encoding: compute compact patches between byte strings and apply them"
requires-python = ">=3.10"
dependencies = []
keywords = ["delta", "diff", "patch", "binary", "bzip2", "suffix array"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
bsdelta-diff = "bsdelta.cli:diff_main"
bsdelta-patch = "bsdelta.cli:patch_main"

[tool.hatch.build.targets.wheel]
packages = ["bsdelta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
