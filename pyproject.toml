[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "erc20types"
version = "0.1.0"
description = "Token pairs, messages, proposals and genesis validation for an ERC20 to native coin bridge module"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["erc20", "ethereum", "bech32", "eip-55", "token-pair", "validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["erc20types"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
