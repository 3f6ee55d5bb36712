[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordfreq-bench"
version = "0.1.0"
description = "Count word frequencies in a text file and write them ranked by count, with several counting strategies to compare"
requires-python = ">=3.10"
dependencies = []
keywords = ["word frequency", "word count", "benchmark", "trie", "hash table", "crc32c"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordfreq-bench = "wordfreq_bench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordfreq_bench"]

[tool.pytest.ini_options]
addopts = "-ra"
