[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kbase"
version = "0.1.0"
description = "Foundation utilities: lexical paths, well-known path lookup, file helpers, base64, MD5, GUIDs, time breakdown and exit callbacks"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "path", "filesystem", "base64", "md5", "guid", "environment"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kbase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
