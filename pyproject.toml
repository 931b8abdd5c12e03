[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triewebkit"
version = "0.1.0"
description = "Trie-based HTTP routing, middleware chains and server utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "router", "trie", "middleware", "web", "rate-limiting", "sessions"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["triewebkit"]

[tool.pytest.ini_options]
addopts = "-ra"
