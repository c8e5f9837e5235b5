[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pockit"
version = "0.1.0"
description = "A segment tree, a stack, two in-memory JSON HTTP services, a coding-agent launcher and a small feature tour."
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["segment-tree", "stack", "data-structures", "flask", "http", "examples"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pockit-stack = "pockit.stack:main"
pockit-agent = "pockit.agent:main"
pockit-items-server = "pockit.items_server:main"
pockit-segment-tree-server = "pockit.segment_tree_server:main"
pockit-basics = "pockit.basics:main"

[tool.hatch.build.targets.wheel]
packages = ["pockit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
