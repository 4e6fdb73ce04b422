[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noemacore"
version = "0.1.0"
description = "A small synthetic-mind core: ontological profiles loaded from YAML and onto16 projections built from stimuli."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["synthetic-mind", "ontology", "onto16", "reasoning-engine", "profile"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
noemacore-demo = "noemacore.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["noemacore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
