[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kyberkem"
version = "0.1.0"
description = "Pure-Python Keccak/SHA-3/SHAKE, AES-256-CTR, CTR-DRBG and centred binomial sampling for lattice-based key encapsulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "kyber",
    "keccak",
    "sha3",
    "shake",
    "aes",
    "ctr-drbg",
    "binomial-sampling",
    "post-quantum",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kyberkem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
