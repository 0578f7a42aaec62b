[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplecloud"
version = "0.1.0"
description = "Core logic of a cloud file-storage client: settings, clipboard, selection, search and navigation."
requires-python = ">=3.10"
dependencies = []
keywords = ["cloud", "file-manager", "settings", "clipboard", "breadcrumb", "search"]
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
    "Topic :: Internet :: File Transfer Protocol (FTP)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simplecloud"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
