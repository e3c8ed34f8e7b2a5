[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slowperipheral"
version = "0.1.0"
description = "Packet encoding, fragmentation and session ids for the SLOW transport protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["slow", "udp", "transport", "protocol", "networking", "packet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["slowperipheral"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
