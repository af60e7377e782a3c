[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "machv"
version = "0.1.0"
description = "Interactive helper for creating and launching QEMU virtual machines from qcow2 disks"
requires-python = ">=3.11"
dependencies = []
keywords = ["qemu", "qcow2", "virtual machine", "kvm", "iso"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
machv = "machv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["machv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
