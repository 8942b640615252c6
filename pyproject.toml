[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mnistlab"
version = "0.1.0"
description = "Build, train and test small fully connected networks on MNIST digits from CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["mnist", "neural network", "backpropagation", "softmax", "digits", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mnistlab = "mnistlab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mnistlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
