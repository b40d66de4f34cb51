[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rbackit"
version = "0.1.0"
description = "Role hierarchies, matching operators and string helpers for access-control models"
requires-python = ">=3.10"
dependencies = []
keywords = ["rbac", "access-control", "authorization", "roles", "permissions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rbackit"]

[tool.pytest.ini_options]
addopts = "-ra"
