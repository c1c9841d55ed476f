[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortbench"
version = "0.1.0"
description = "Benchmark insertion, quick, merge, heap and composite sorts on worst-case and average-case inputs"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["sorting", "benchmark", "algorithms", "quicksort", "mergesort", "heapsort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sortbench = "sortbench.cli:main"
sortbench-sigma = "sortbench.sigma:main"

[tool.hatch.build.targets.wheel]
packages = ["sortbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
