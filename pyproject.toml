[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gqlgo"
version = "0.1.0"
description = "GraphQL building blocks: query errors, ID and custom scalars, cache hints and example resolvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphql", "resolver", "scalar", "query-error", "cache-control"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gqlgo"]

[tool.pytest.ini_options]
addopts = "-ra"
