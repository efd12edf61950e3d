[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codekata"
version = "0.1.0"
description = "Small programming exercises: card decks, string puzzles, primes, link checking and a file upload service"
requires-python = ">=3.10"
keywords = ["kata", "exercises", "education", "algorithms", "wsgi", "upload"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "requests>=2.28",
    "werkzeug>=2.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
codekata-cards = "codekata.cards:main"
codekata-strings = "codekata.textkata:main"
codekata-frequency = "codekata.frequency:main"
codekata-primes = "codekata.primes:main"
codekata-parallel-sum = "codekata.parallel_sum:main"
codekata-linkcheck = "codekata.linkcheck:main"
codekata-store = "codekata.store:main"
codekata-uploader = "codekata.uploader:main"
codekata-client = "codekata.client:main"
codekata-tour = "codekata.tour:main"

[tool.hatch.build.targets.wheel]
packages = ["codekata"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
