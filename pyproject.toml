[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tbengine"
version = "0.1.0"
description = "A small HTML and CSS engine: parse documents into a DOM tree, parse stylesheets, and select nodes with CSS selectors."
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "css", "dom", "selector", "parser", "browser-engine"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tbengine = "tbengine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tbengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
