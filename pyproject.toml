[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebs-csi"
version = "1.2.1"
description = "Options, identity, topology, in-flight tracking and mount helpers for a CSI block storage driver"
requires-python = ">=3.10"
dependencies = []
keywords = ["csi", "kubernetes", "ebs", "volumes", "snapshots", "storage", "topology"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ebs_csi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
