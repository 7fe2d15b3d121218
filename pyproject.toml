[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "banksystem"
version = "0.1.0"
description = "A small in-memory bank: users, multi-currency cash, deposits, withdrawals, transfers and suspensions"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounting", "currency", "ledger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
banksystem-demo = "banksystem.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["banksystem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
