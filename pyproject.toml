[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trafficwatch"
version = "0.1.0"
description = "Data model and analysis helpers for monitoring network traffic: connections, hosts, protocols and threshold notifications"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "traffic", "monitoring", "packets", "ipv6", "notifications"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
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

[tool.hatch.build.targets.wheel]
packages = ["trafficwatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
