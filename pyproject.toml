[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primeweb"
version = "0.1.0"
description = "An interactive prime-number checker and a small Flask web application with form validation and client IP detection"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["prime", "flask", "forms", "validation", "sessions", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
is-it-prime = "primeweb.prime:main"

[tool.hatch.build.targets.wheel]
packages = ["primeweb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
