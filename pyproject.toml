[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dmacs"
version = "0.1.0"
description = "Editing logic for a small Emacs-flavoured text editor: cursor movement, scrolling, search, selection, key decoding and saved cursor positions"
requires-python = ">=3.10"
keywords = ["editor", "text", "emacs", "cursor", "search", "selection"]
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
    "Topic :: Text Editors",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
    "freezegun",
]

[tool.hatch.build.targets.wheel]
packages = ["dmacs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
