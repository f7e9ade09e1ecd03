[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anunaya"
version = "0.1.0"
description = "Building blocks for rollups: blocks, Reed-Solomon erasure coding, the MinRoot VDF and a transaction sequencer"
requires-python = ">=3.10"
keywords = [
    "rollup",
    "sequencer",
    "mempool",
    "erasure-code",
    "reed-solomon",
    "vdf",
    "minroot",
    "keccak",
    "secp256k1",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Framework :: aiohttp",
    "Topic :: System :: Distributed Computing",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "pycryptodome",
    "aiohttp>=3.9",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
anunaya-sequencer = "anunaya.server:main"

[tool.hatch.build.targets.wheel]
packages = ["anunaya"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
