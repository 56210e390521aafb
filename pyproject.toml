[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkchain"
version = "0.1.0"
description = "Linked-list data structures: singly, doubly, circular and pool-backed lists, a stack, a queue and polynomials."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "doubly linked list",
    "circular list",
    "stack",
    "queue",
    "polynomial",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linkchain-singly = "linkchain.singly:main"
linkchain-doubly = "linkchain.doubly:main"
linkchain-stack = "linkchain.linked_stack:main"
linkchain-queue = "linkchain.linked_queue:main"
linkchain-circular = "linkchain.circular:main"
linkchain-static = "linkchain.pooled:main"
linkchain-polynomial = "linkchain.polynomial:main"

[tool.hatch.build.targets.wheel]
packages = ["linkchain"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
