[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raptoroms"
version = "0.1.0"
description = "Order management and smart order routing: venues, order books, execution algorithms and basket trading."
requires-python = ">=3.10"
dependencies = []
keywords = ["trading", "order-routing", "order-book", "splay-tree", "twap", "vwap", "iceberg", "basket"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raptoroms"]

[tool.pytest.ini_options]
addopts = "-ra"
