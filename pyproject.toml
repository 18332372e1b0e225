[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "learnersdict"
version = "0.1.0"
description = "A personal vocabulary notebook: folders of words with notes, paging, sorting and JSON export/import"
requires-python = ">=3.10"
dependencies = []
keywords = ["dictionary", "vocabulary", "words", "learning", "notebook"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
learnersdict = "learnersdict.app:main"

[tool.setuptools.packages.find]
include = ["learnersdict*"]

[tool.pytest.ini_options]
addopts = "-ra"
