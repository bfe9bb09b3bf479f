[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtop"
version = "0.1.0"
description = "A terminal system monitor inspired by top, htop and btop"
requires-python = ">=3.11"
keywords = ["monitor", "top", "htop", "terminal", "system", "cpu", "memory", "network"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil>=5.9",
    "rich>=13.0",
    "blessed>=1.20",
    "platformdirs>=3.0",
    "tomli-w>=1.0",
]

[project.optional-dependencies]
test = ["pytest>=7.0"]

[project.scripts]
rtop = "rtop.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rtop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
