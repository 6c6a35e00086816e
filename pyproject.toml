[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netproto-analyzer"
version = "0.1.0"
description = "Live network packet capture with protocol statistics and a terminal dashboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "packet", "capture", "protocol", "monitoring", "bandwidth", "tcp", "udp", "icmp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netproto-analyzer = "netproto_analyzer.cli:main"
netproto-demo = "netproto_analyzer.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["netproto_analyzer"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
