[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oascore"
version = "0.5.0"
description = "Building blocks for generating OpenAPI 3.0 documentation from request and response component types"
requires-python = ">=3.10"
dependencies = []
keywords = ["openapi", "oas3", "documentation", "schema", "api"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oascore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
